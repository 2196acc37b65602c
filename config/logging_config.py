"""
Logging for the employee front-end.

  logs/app.log       views and service calls (INFO+)
  logs/errors.log    backend failures and crashes (ERROR+)
  logs/requests.log  one line per site request (middleware)
  logs/debug.log     request payloads sent to the backend, DEBUG only

Console output mirrors app.log with a shorter format.
"""

from pathlib import Path

LOG_DIR = Path(__file__).resolve().parent.parent / 'logs'
LOG_DIR.mkdir(exist_ok=True)

MB = 1024 * 1024


def _rotating_file(filename, level, backups, formatter='verbose', **extra):
    return {
        'level': level,
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': str(LOG_DIR / filename),
        'maxBytes': 5 * MB,
        'backupCount': backups,
        'formatter': formatter,
        'encoding': 'utf-8',
        **extra,
    }


def _logger(handlers, level):
    return {'handlers': handlers, 'level': level, 'propagate': False}


def get_logging_config(debug=True):
    """Return the LOGGING dict for Django settings."""
    app_level = 'DEBUG' if debug else 'INFO'
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{asctime} [{levelname}] {name} | {module}.{funcName}:{lineno} | {message}',
                'style': '{',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
            'request': {
                'format': '{asctime} [{levelname}] {message}',
                'style': '{',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
            'console': {
                'format': '{asctime} [{levelname}] {name}: {message}',
                'style': '{',
                'datefmt': '%H:%M:%S',
            },
        },
        'filters': {
            'debug_only': {'()': 'django.utils.log.RequireDebugTrue'},
        },
        'handlers': {
            'console': {
                'level': app_level,
                'class': 'logging.StreamHandler',
                'formatter': 'console',
            },
            'app_file': _rotating_file('app.log', 'INFO', backups=5),
            'error_file': _rotating_file('errors.log', 'ERROR', backups=10),
            'request_file': _rotating_file('requests.log', 'INFO', backups=3, formatter='request'),
            'debug_file': _rotating_file('debug.log', 'DEBUG', backups=2, filters=['debug_only']),
        },
        'loggers': {
            'django': _logger(['console', 'app_file', 'error_file'], 'INFO'),
            'django.request': _logger(['request_file', 'error_file', 'console'], 'INFO'),
            'apps.employees': _logger(['console', 'app_file', 'error_file', 'debug_file'], app_level),
            'middleware': _logger(['console', 'request_file', 'error_file'], app_level),
            'diagnostics': _logger(['console', 'app_file', 'error_file'], 'DEBUG'),
        },
    }
