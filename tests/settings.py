SECRET_KEY = "django-multidomain-tests"
DEBUG = False
ALLOWED_HOSTS = ["*"]
USE_TZ = True

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "django_multidomain",
    "demo",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
    "django_multidomain.middleware.MultiDomainMiddleware",
]

ROOT_URLCONF = "demo.urls"
APPEND_SLASH = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "multidomain-tests",
    }
}

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django_multidomain.context_processors.multidomain",
            ],
        },
    }
]

MULTIDOMAIN_CONFIG = {
    "HOME_URL": "http://example.com",
    "DOMAINS": [
        {"host": "example.de", "lang": "de_DE", "protocol": "https"},
        {"host": "example.fr", "base": "/fr", "lang": "fr_FR"},
        {"host": "localhost:8000"},
    ],
    "IGNORE_DEFAULT_PORTS": True,
    "ADD_CANONICAL": False,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "django_multidomain": {"handlers": ["console"], "level": "WARNING"},
    },
}
