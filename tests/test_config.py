import logging
import os

import pytest

from mis_dashboard import bootstrap_env
from mis_dashboard.config import (
    DEFAULT_MASTER_EMPLOYEES_CSV_URL,
    DEFAULT_MIS_CSV_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    TABS,
    configure_logging,
    load_settings,
)

SETTING_KEYS = [
    "MIS_CSV_URL",
    "MASTER_EMPLOYEES_CSV_URL",
    "CANVASSING_CSV_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in SETTING_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_point_at_published_sheets():
    settings = load_settings()
    assert settings.mis_csv_url == DEFAULT_MIS_CSV_URL
    assert settings.master_employees_csv_url == DEFAULT_MASTER_EMPLOYEES_CSV_URL
    assert settings.canvassing_csv_url is None
    assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT_SECONDS


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MIS_CSV_URL", "https://sheets.test/mis.csv")
    monkeypatch.setenv("CANVASSING_CSV_URL", "https://sheets.test/canvassing.csv")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.mis_csv_url == "https://sheets.test/mis.csv"
    assert settings.canvassing_csv_url == "https://sheets.test/canvassing.csv"
    assert settings.request_timeout == 12.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_bad_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", raw)
    assert load_settings().request_timeout == DEFAULT_REQUEST_TIMEOUT_SECONDS


def test_secrets_are_copied_without_overriding(monkeypatch):
    monkeypatch.setenv("MIS_CSV_URL", "https://sheets.test/from-env.csv")
    monkeypatch.setattr(
        bootstrap_env,
        "_secrets_as_dict",
        lambda: {"mis_csv_url": "https://sheets.test/from-secrets.csv", "sheets": {"canvassing-url": "c"}},
    )
    monkeypatch.delenv("SHEETS_CANVASSING_URL", raising=False)
    added = bootstrap_env.export_secrets_to_env()
    try:
        assert added == 1
        assert os.environ["MIS_CSV_URL"] == "https://sheets.test/from-env.csv"
        assert os.environ["SHEETS_CANVASSING_URL"] == "c"
    finally:
        os.environ.pop("SHEETS_CANVASSING_URL", None)


def test_configure_logging_is_idempotent():
    logger = configure_logging("WARNING")
    handlers = list(logger.handlers)
    assert configure_logging("INFO") is logger
    assert logger.handlers == handlers
    assert logger.level == logging.INFO


def test_tab_keys_are_unique():
    keys = [tab.key for tab in TABS]
    assert len(keys) == len(set(keys))


class _BrokenSecrets:
    def __bool__(self):
        return True

    def get(self, name):
        raise FileNotFoundError("no secrets.toml")


def test_unreadable_secrets_fall_back_to_default_and_log(monkeypatch, caplog):
    from mis_dashboard import config

    monkeypatch.setattr(config.st, "secrets", _BrokenSecrets())
    with caplog.at_level(logging.DEBUG, logger="mis_dashboard.config"):
        assert config._get_secret("MIS_CSV_URL", "fallback") == "fallback"
    assert any(
        record.levelno == logging.DEBUG and "MIS_CSV_URL" in record.getMessage()
        for record in caplog.records
    )
