"""Settings used by the pytest suite.

Runs against an in-memory SQLite database with fast password hashing and
a fixed default price so tests do not depend on the environment.
"""

from decimal import Decimal

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES['staticfiles'] = {  # noqa: F405
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

COURT_OPENING_HOUR = 6
COURT_CLOSING_HOUR = 23
COURT_TIME_SLOTS = tuple(f'{hour:02d}:00' for hour in range(6, 23))
COURT_DEFAULT_PRICE = Decimal('1500')

ADMIN_USER = 'admin'
ADMIN_PASS = 'court-admin-pass'

LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
