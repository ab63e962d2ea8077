from pathlib import Path

from config.env import get_bool, get_env, get_int, get_list, get_path

BASE_DIR = Path(__file__).resolve().parents[2]

SECRET_KEY = get_env("SECRET_KEY", "dev-insecure-change-me")
DEBUG = get_bool("DEBUG", False)
ALLOWED_HOSTS = get_list("ALLOWED_HOSTS", ["localhost", "127.0.0.1"])

INSTALLED_APPS = [
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_htmx",
    "apps.store.apps.StoreConfig",
    "apps.accounts.apps.AccountsConfig",
    "apps.players.apps.PlayersConfig",
    "apps.matches.apps.MatchesConfig",
    "apps.standings.apps.StandingsConfig",
    "apps.leaderboards.apps.LeaderboardsConfig",
    "apps.content.apps.ContentConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_htmx.middleware.HtmxMiddleware",
]

ROOT_URLCONF = "config.urls"
ASGI_APPLICATION = "config.asgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
                "apps.accounts.context_processors.league",
            ],
        },
    }
]

WSGI_APPLICATION = "config.wsgi.application"

# All league state lives in one JSON document; there is no relational database.
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATICFILES_DIRS = [BASE_DIR / "static"]

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "vimhub-local",
    }
}

SESSION_ENGINE = "django.contrib.sessions.backends.cache"
MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

LEAGUE_DATA_FILE = get_path("LEAGUE_DATA_FILE", BASE_DIR.parent / "data.json")
LEAGUE_ADMIN_KEY = get_env("LEAGUE_ADMIN_KEY", "VIM-STAFF-2025")
LEAGUE_LOCK_TIMEOUT = get_int("LEAGUE_LOCK_TIMEOUT", 10)
LEAGUE_LOGIN_RATE = get_env("LEAGUE_LOGIN_RATE", "10/m")
PORT = get_int("PORT", 3000)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "root": {"handlers": ["console"], "level": "INFO"},
}
