"""
Test settings for the car rental project.
"""
from .base import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

LOG_LEVEL = 'WARNING'
LOGGING['loggers']['apps']['level'] = LOG_LEVEL  # noqa: F405
LOGGING['loggers']['config']['level'] = LOG_LEVEL  # noqa: F405
