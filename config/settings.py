"""Django settings for the ticket purchase API.

Values come from environment variables; defaults are for local development.
"""

import os

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-local-development-key")

DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "rest_framework",
    "tickets",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"

# Purchases are not persisted.
DATABASES = {}

USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# Ticket purchases
TICKETS_MAX_PER_PURCHASE = int(os.getenv("TICKETS_MAX_PER_PURCHASE", "25"))
TICKETS_PAYMENT_GATEWAY = os.getenv(
    "TICKETS_PAYMENT_GATEWAY", "tickets.gateways.local.LocalPaymentGateway"
)
TICKETS_SEAT_RESERVATION_GATEWAY = os.getenv(
    "TICKETS_SEAT_RESERVATION_GATEWAY", "tickets.gateways.local.LocalSeatReservationGateway"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "tickets": {
            "level": LOG_LEVEL,
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}
