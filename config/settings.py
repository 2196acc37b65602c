"""
Django settings for the Employee Management System front-end.

Values that change between environments are read with python-decouple
from the process environment or a local .env file.
"""

from pathlib import Path

from decouple import config, Csv

from config.logging_config import get_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config('SECRET_KEY', default='django-insecure-ems-dev-key')
DEBUG = config('DEBUG', default=True, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1,testserver', cast=Csv())

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'widget_tweaks',
    'django_browser_reload',
    'apps.employees',
]

MIDDLEWARE = [
    'config.middleware.RequestLoggingMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'django_browser_reload.middleware.BrowserReloadMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'config.context_processors.site_config',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# No local persistence: every record lives behind the employee REST API.
DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATICFILES_DIRS = [BASE_DIR / 'static']

APPEND_SLASH = False

# --- Employee REST API ---
EMPLOYEE_API_BASE_URL = config('EMPLOYEE_API_BASE_URL', default='http://localhost:8080/api')
EMPLOYEE_API_TIMEOUT = config('EMPLOYEE_API_TIMEOUT', default=None, cast=lambda v: float(v) if v else None)

# Error messages under the form inputs are shown while the field is filled in.
# Flip to True to show them while the field is blank instead.
EMPLOYEE_FORM_SHOW_ERRORS_WHEN_BLANK = config('EMPLOYEE_FORM_SHOW_ERRORS_WHEN_BLANK', default=False, cast=bool)

LOGGING = get_logging_config(debug=DEBUG)
