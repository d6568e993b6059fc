import logging
import logging.config

from quiz_app.config import LOG_FILE, LOG_LEVEL


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Set default user if not provided
        return True


def build_logging_config() -> dict:
    handlers = {
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['user_filter']
        },
    }
    if LOG_FILE:
        handlers['file'] = {
            'level': LOG_LEVEL,
            'class': 'logging.FileHandler',
            'filename': LOG_FILE,
            'formatter': 'standard',
            'filters': ['user_filter']
        }

    layer_logger = {
        'handlers': list(handlers),
        'level': LOG_LEVEL,
        'propagate': False,
    }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
            },
        },
        'filters': {
            'user_filter': {
                '()': UserFilter,
            },
        },
        'handlers': handlers,
        'loggers': {
            'services': dict(layer_logger),
            'routers': dict(layer_logger),
            'auth': dict(layer_logger),
            'database': dict(layer_logger),
            '': {
                'handlers': list(handlers),
                'level': LOG_LEVEL,
                'propagate': True,
            }
        }
    }


def setup_logging():
    logging.config.dictConfig(build_logging_config())
