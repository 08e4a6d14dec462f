"""Django settings for the eventboard project.

Values come from environment variables with development defaults.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = [
    host for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost").split(",") if host
]

INSTALLED_APPS = [
    "eventboard.apps.EventboardConfig",
]


def _database() -> dict:
    engine = os.environ.get("EVENTBOARD_DB_ENGINE", "sqlite")
    if engine == "postgresql":
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.environ.get("EVENTBOARD_DB_NAME", "eventboard"),
            "USER": os.environ.get("EVENTBOARD_DB_USER", "eventboard"),
            "PASSWORD": os.environ.get("EVENTBOARD_DB_PASSWORD", ""),
            "HOST": os.environ.get("EVENTBOARD_DB_HOST", "localhost"),
            "PORT": os.environ.get("EVENTBOARD_DB_PORT", "5432"),
        }
    return {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("EVENTBOARD_DB_NAME", str(BASE_DIR / "eventboard.sqlite3")),
    }


DATABASES = {"default": _database()}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "eventboard": {
            "handlers": ["console"],
            "level": os.environ.get("EVENTBOARD_LOG_LEVEL", "INFO").upper(),
            "propagate": True,
        },
    },
}
