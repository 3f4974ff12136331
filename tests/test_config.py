import logging

from users_api.config import Settings
from users_api.logging_config import setup_logging


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TABLE_NAME", "users")
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.table_name == "users"
    assert settings.aws_region == "eu-west-1"
    assert settings.dynamodb_endpoint_url == "http://localhost:8000"
    assert settings.log_level == "DEBUG"


def test_settings_defaults(monkeypatch):
    for name in ("TABLE_NAME", "AWS_REGION", "DYNAMODB_ENDPOINT_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.table_name is None
    assert settings.aws_region is None
    assert settings.dynamodb_endpoint_url is None
    assert settings.log_level == "INFO"


def test_setup_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
