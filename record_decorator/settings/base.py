# -*- coding: utf-8 -*-
"""base Django settings for record decorator

Refer Django settings documentation
https://docs.djangoproject.com/en/4.2/ref/settings/

Usage:
- base settings are setup for local quick start and unit tests
- extend and overwrite this base settings
- e.g. see it.py

WARNING:
- DO NOT USE BASE SETTINGS FOR PRODUCTION
"""
import os
import uuid

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', str(uuid.uuid4()))

DEBUG = os.getenv('DJANGO_DEBUG', True)

ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'record_decorator',
    'showcase',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(BASE_DIR, 'db.sqlite3'),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '%(asctime)s %(name)-12s %(levelname)-8s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
        },
    },
    'loggers': {
        '': {
            'level': 'INFO',
            'handlers': ['console'],
        },
        'record_decorator': {
            'level': os.getenv('RECORD_DECORATOR_LOG_LEVEL', 'INFO'),
            'handlers': ['console'],
            'propagate': False,
        },
    },
}
