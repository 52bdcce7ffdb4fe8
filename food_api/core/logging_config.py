# food_api/core/logging_config.py

from logging.config import dictConfig

from food_api.core.config import settings


def build_logging_config(level: str = "INFO", sql_echo: bool = False) -> dict:
    """
    Все пишет в stdout одним форматом. Логгеры пакета food_api
    работают на уровне `level`, SQL-запросы видны только при `sql_echo`.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "food_api": {"handlers": ["console"], "level": level, "propagate": False},
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "INFO" if sql_echo else "WARNING",
                "propagate": False,
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def setup_logging():
    """Применяет конфигурацию логирования из настроек."""
    dictConfig(build_logging_config(settings.LOG_LEVEL, settings.SQL_ECHO))
