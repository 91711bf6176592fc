"""
Django settings for the currency converter project.

There is no database and no HTTP surface: Django provides configuration,
logging setup and the management-command entry point.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "currency-converter-not-for-production")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "apps.converter.apps.ConverterConfig",
]

DATABASES: dict = {}

USE_TZ = True

# Currency every rate in the static table is quoted against
BASE_CURRENCY = "USD"

LOG_LEVEL = os.environ.get("CONVERTER_LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "apps.converter": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}
