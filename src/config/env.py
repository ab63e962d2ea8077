import os
from pathlib import Path

TRUTHY = {"1", "true", "yes", "on"}


def get_env(name, default=None, *, required=False):
    value = os.getenv(name, default)
    if required and value is None:
        raise RuntimeError(f"Missing required env var: {name}")
    return value


def get_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def get_list(name, default=None):
    value = os.getenv(name)
    if value is None:
        return default or []
    return [item.strip() for item in value.split(",") if item.strip()]


def get_int(name, default=0):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise RuntimeError(f"Env var {name} must be an integer, got {value!r}") from exc


def get_path(name, default):
    value = os.getenv(name)
    return Path(value).expanduser() if value else Path(default)
