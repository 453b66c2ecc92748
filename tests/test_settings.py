import logging

import pytest
from pydantic import ValidationError

from tabparse.settings import Settings, configure_logging


def test_from_env_reads_prefixed_variables():
    settings = Settings.from_env({
        "TABPARSE_MAX_UPLOAD_BYTES": "2048",
        "TABPARSE_LOG_LEVEL": "debug",
        "TABPARSE_DEFAULT_ENCODING": " latin-1 ",
        "MAX_UPLOAD_BYTES": "1",
    })
    assert settings.max_upload_bytes == 2048
    assert settings.log_level == "DEBUG"
    assert settings.default_encoding == "latin-1"


def test_from_env_defaults():
    settings = Settings.from_env({})
    assert settings.log_level == "WARNING"
    assert settings.max_upload_bytes > 0


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings.from_env({"TABPARSE_LOG_LEVEL": "chatty"})


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("tabparse")
    previous = logger.level
    try:
        configure_logging("DEBUG")
        assert logger.level == logging.DEBUG
        assert logging.getLogger("tabparse.parser").isEnabledFor(logging.DEBUG)
    finally:
        logger.setLevel(previous)
