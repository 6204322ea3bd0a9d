"""
Django settings for mdsite.

Only what the markdown pipeline needs: installed apps, templates, logging and
the MARKDOWN_* options read by ``pages.markdown``.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("MDSITE_SECRET_KEY", "insecure-dev-key-change-me")

DEBUG = os.environ.get("MDSITE_DEBUG", "0") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "pages",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_TZ = True

# Markdown rendering
# header.md / footer.md are read from here for full-page renders
MARKDOWN_CONTENT_DIR = os.environ.get("MDSITE_CONTENT_DIR", str(BASE_DIR / "content"))

# Overrides for pages.markdown.config.RenderOptions, e.g. {"highlight_style": "monokai"}
MARKDOWN_RENDER_OPTIONS = {}

# Prefix for the stylesheet/script references appended to full pages
MARKDOWN_STATIC_URL = "/_static/"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "pages": {
            "handlers": ["console"],
            "level": os.environ.get("MDSITE_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
