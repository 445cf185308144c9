"""
Django settings for the latency demo project.

Region tokens and database credentials come from the environment so the same
image runs unchanged in every region.
"""
import os
from pathlib import Path

from replica_routing.endpoints import configure_databases, configure_databases_from_url
from replica_routing.region import RegionContext

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-latency-demo-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() == 'true'

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',') if h]

# Region context (FLY_REGION, PRIMARY_REGION), read once at startup and shared
# by DATABASES and replica_routing.region.get_region_context()
REGION_CONTEXT = RegionContext.load()

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',
    'replica_routing.apps.ReplicaRoutingConfig',
]

MIDDLEWARE = [
    'replica_routing.middleware.RegionHeaderMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'replica_routing.middleware.ReplayMiddleware',
]

ROOT_URLCONF = 'latency_demo.urls'

WSGI_APPLICATION = 'latency_demo.wsgi.application'

# Database
if os.environ.get('DATABASE_URL'):
    DATABASES = configure_databases_from_url(os.environ['DATABASE_URL'], REGION_CONTEXT)
elif os.environ.get('POSTGRES_DB_HOST'):
    DATABASES = configure_databases({
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.environ.get('POSTGRES_DB_NAME', 'latency_demo'),
        'USER': os.environ.get('POSTGRES_DB_USER', 'postgres'),
        'PASSWORD': os.environ.get('POSTGRES_DB_PASSWORD', ''),
        'HOST': os.environ['POSTGRES_DB_HOST'],
        'PORT': os.environ.get('POSTGRES_DB_PORT', '5432'),
    }, REGION_CONTEXT)
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DATABASE_ROUTERS = ['replica_routing.db_router.RegionDatabaseRouter']

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# Logging
LOG_LEVEL = os.environ.get('DJANGO_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'suppress_replayable': {
            '()': 'replica_routing.logging_utils.SuppressReplayableErrors',
        },
    },
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
            'filters': ['suppress_replayable'],
        },
    },
    'loggers': {
        'django.request': {
            'handlers': ['console'],
            'level': 'ERROR',
            'filters': ['suppress_replayable'],
            'propagate': False,
        },
        'replica_routing': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
