# wordcards/settings.py
"""
Django settings for the wordcards backend.

Everything deployment-specific is read from the environment (or a `.env`
file next to manage.py) through python-decouple.
"""
from __future__ import annotations

from pathlib import Path

from decouple import Csv, config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config("SECRET_KEY", default="dev-change-this-secret")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "rest_framework",
    "cards",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
]

ROOT_URLCONF = "wordcards.urls"
WSGI_APPLICATION = "wordcards.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": config("DATABASE_PATH", default=str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework.authentication.BasicAuthentication",
    ],
}

# ── card catalog ────────────────────────────────────────────────────────────
CARDS_IMPORT_PATH = Path(
    config("CARDS_IMPORT_PATH", default=str(BASE_DIR / "storage" / "cards.json"))
)
CARDS_SAMPLE_SIZE = config("CARDS_SAMPLE_SIZE", default=25, cast=int)
CARDS_SAMPLE_VERSION = config("CARDS_SAMPLE_VERSION", default="Original")
# unset → fresh OS entropy on every request
CARDS_SAMPLE_SEED = config(
    "CARDS_SAMPLE_SEED", default="", cast=lambda v: int(v) if v else None
)

# ── logging ─────────────────────────────────────────────────────────────────
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(levelname)s: %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "cards": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": True},
    },
}
