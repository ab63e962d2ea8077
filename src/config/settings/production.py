from .base import *  # noqa: F403

# ── Core ──────────────────────────────────────────────────────────────────────

DEBUG = False

# ALLOWED_HOSTS is already populated from the ALLOWED_HOSTS env var in base.py.

# Required so Django accepts form posts behind the hosting proxy.
CSRF_TRUSTED_ORIGINS = get_list("CSRF_TRUSTED_ORIGINS", [])  # noqa: F405

# ── Security ──────────────────────────────────────────────────────────────────

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
# Rate limits key on the client address the proxy forwards, not the proxy itself.
RATELIMIT_IP_META_KEY = "apps.accounts.utils.client_ip"
SECURE_SSL_REDIRECT = True
SECURE_HSTS_SECONDS = 3600
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ── Sessions ──────────────────────────────────────────────────────────────────
# Sessions live in the local cache, so a restart logs everyone out. The league
# runs as a single server process.

SESSION_COOKIE_AGE = get_int("SESSION_COOKIE_AGE", 60 * 60 * 24 * 14)  # noqa: F405

# ── Static files (Whitenoise) ─────────────────────────────────────────────────

STATIC_ROOT = BASE_DIR / "staticfiles"  # noqa: F405

# Insert WhiteNoise right after SecurityMiddleware so it serves files before
# any session processing.
MIDDLEWARE = [  # noqa: F405
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_htmx.middleware.HtmxMiddleware",
]

STORAGES = {
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# ── Logging ───────────────────────────────────────────────────────────────────

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        }
    },
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    },
}
