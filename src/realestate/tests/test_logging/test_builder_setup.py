# src/realestate/tests/test_logging/test_builder_setup.py
import logging

from realestate.config import Settings
from realestate.core.logging.builder import make_dict_config, setup_logging


def file_settings(log_dir) -> Settings:
    return Settings(LOG_FORMAT="json", LOG_LEVEL="INFO", LOG_TO_STDOUT=False, LOG_DIR=log_dir, ENV="development")


def test_make_dict_config_uses_file_handlers_when_not_on_stdout(tmp_path):
    cfg = make_dict_config(file_settings(tmp_path))

    assert {"console", "file", "error_file"} <= set(cfg["handlers"])
    assert "error_console" not in cfg["handlers"]
    assert {"json", "standard"} <= set(cfg["formatters"])
    assert {"request_id", "redact"} <= set(cfg["filters"])


def test_make_dict_config_stdout_only(tmp_path):
    settings = Settings(LOG_TO_STDOUT=True, LOG_DIR=tmp_path)
    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["disable_existing_loggers"] is False


def test_sql_logging_is_quiet_unless_enabled(tmp_path):
    quiet = make_dict_config(Settings(LOG_TO_STDOUT=True, ENABLE_SQL_LOGGING=False))
    loud = make_dict_config(Settings(LOG_TO_STDOUT=True, ENABLE_SQL_LOGGING=True))

    assert quiet["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert loud["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = file_settings(tmp_path / "logs")
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    assert logging.getLogger().handlers

    # back to console output for the rest of the session
    setup_logging(Settings(LOG_TO_STDOUT=True))
