import logging

import pytest
from pydantic import ValidationError

from sfid.core.config import Settings, load_settings
from sfid.services.logger import setup_logger


def test_defaults(monkeypatch):
    for name in ("SFID_MACHINE_ID", "SFID_EPOCH", "SFID_WAIT_ON_OVERFLOW", "SFID_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.MACHINE_ID is None
    assert settings.EPOCH == 0
    assert settings.WAIT_ON_OVERFLOW is False
    assert settings.LOG_LEVEL == "INFO"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SFID_MACHINE_ID", "1023")
    monkeypatch.setenv("SFID_EPOCH", "1609459200000")
    monkeypatch.setenv("SFID_WAIT_ON_OVERFLOW", "true")

    settings = load_settings()

    assert settings.MACHINE_ID == 1023
    assert settings.EPOCH == 1_609_459_200_000
    assert settings.WAIT_ON_OVERFLOW is True


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SFID_MACHINE_ID", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("SFID_MACHINE_ID=300\n")

    assert Settings(_env_file=env_file).MACHINE_ID == 300


@pytest.mark.parametrize(
    "name, value",
    [("SFID_MACHINE_ID", "1024"), ("SFID_MACHINE_ID", "-1"), ("SFID_EPOCH", "-5")],
)
def test_rejects_out_of_range_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        load_settings()


def test_setup_logger_attaches_one_handler():
    logger = setup_logger()
    setup_logger()

    assert logger.name == "sfid"
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_log_level_is_normalized_and_validated(monkeypatch):
    monkeypatch.setenv("SFID_LOG_LEVEL", "debug")
    assert load_settings().LOG_LEVEL == "DEBUG"

    monkeypatch.setenv("SFID_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        load_settings()


def test_setup_logger_leaves_level_alone_without_one():
    logger = logging.getLogger("sfid")
    logger.setLevel(logging.WARNING)

    setup_logger()
    assert logger.level == logging.WARNING

    setup_logger(level="ERROR")
    assert logger.level == logging.ERROR
