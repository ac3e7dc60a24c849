"""Django settings for the storefront.

Everything deployment-specific comes from environment variables so the
same build runs locally and behind the real backend.
"""

import os

from storefront.config import Search


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in {"1", "true", "yes"}


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.sessions",
    "rest_framework",
    "storefront",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "storefront_site.urls"
ASGI_APPLICATION = "storefront_site.asgi.application"

# The storefront keeps no data of its own; the catalog lives in the backend.
DATABASES = {}

# Session-scoped storage: signed cookie, gone when the browser closes.
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
SESSION_EXPIRE_AT_BROWSER_CLOSE = True
SESSION_COOKIE_HTTPONLY = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "UNAUTHENTICATED_USER": None,
}

USE_TZ = True
TIME_ZONE = "UTC"

# --- Backend -----------------------------------------------------------------
# Base URL of the catalog / checkout service.
STOREFRONT_BACKEND_URL = os.getenv("STOREFRONT_BACKEND_URL", "http://localhost:8080")

# Seconds before any backend call is treated as a transport failure.
STOREFRONT_BACKEND_TIMEOUT = float(os.getenv("STOREFRONT_BACKEND_TIMEOUT", "10.0"))

# --- Search ------------------------------------------------------------------
# 0 = exact match only, 1 = match anything.
STOREFRONT_SEARCH_THRESHOLD = float(
    os.getenv("STOREFRONT_SEARCH_THRESHOLD", str(Search.DEFAULT_THRESHOLD))
)
