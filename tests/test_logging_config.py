# tests/test_logging_config.py

from food_api.core.logging_config import build_logging_config


def test_app_logger_follows_configured_level():
    config = build_logging_config("debug")

    assert config["loggers"]["food_api"]["level"] == "DEBUG"
    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"


def test_sql_echo_enables_engine_logger():
    config = build_logging_config(sql_echo=True)

    assert config["loggers"]["sqlalchemy.engine"]["level"] == "INFO"
    assert set(config["loggers"]) == {"food_api", "sqlalchemy.engine"}
