import logging

import pytest
from pydantic import ValidationError

from core.config import AppSettings, write_user_env_vars
from core.logging_setup import setup_logging


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("KANBAN_BASE_URL", "http://planka.local:3000/")
    monkeypatch.setenv("KANBAN_HTTP_TIMEOUT_SECONDS", "5")

    settings = AppSettings(_env_file=None)

    assert settings.base_url == "http://planka.local:3000"
    assert settings.http_timeout_seconds == 5.0


def test_settings_credentials_flag():
    assert AppSettings(_env_file=None, email_or_username="demo", password="pw").has_credentials
    assert not AppSettings(_env_file=None, email_or_username="demo", password=None).has_credentials


def test_blank_base_url_is_none():
    assert AppSettings(_env_file=None, base_url="  ").base_url is None


def test_log_level_is_normalized_and_checked(monkeypatch):
    assert AppSettings(_env_file=None, log_level=" info ").log_level == "INFO"

    monkeypatch.setenv("KANBAN_LOG_LEVEL", "basic_format")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_write_user_env_vars_merges_existing(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nKANBAN_BASE_URL=http://old\nKANBAN_API_TOKEN='abc'\n", encoding="utf-8")

    write_user_env_vars({"KANBAN_BASE_URL": "http://new", "KANBAN_PASSWORD": None}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["KANBAN_API_TOKEN=abc", "KANBAN_BASE_URL=http://new"]


def test_setup_logging_adds_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "kanban.log"
    settings = AppSettings(_env_file=None, log_level="debug", log_file=log_file)

    logger = setup_logging(settings)
    try:
        logger.debug("hello")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
