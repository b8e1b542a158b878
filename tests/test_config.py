import logging

import pytest

from passgen.core.config import DEFAULT_LENGTH, load_settings
from passgen.core.errors import ConfigurationError
from passgen.logging_config import HANDLER_NAME, setup_logging


def test_defaults_from_empty_environment():
    settings = load_settings({})

    assert settings.log_level == 'WARNING'
    assert settings.default_length == DEFAULT_LENGTH
    assert settings.log_level_value == logging.WARNING


def test_overrides():
    settings = load_settings({'PASSGEN_LOG_LEVEL': 'debug', 'PASSGEN_DEFAULT_LENGTH': '12'})

    assert settings.log_level == 'DEBUG'
    assert settings.default_length == 12


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv('PASSGEN_DEFAULT_LENGTH', '5')
    assert load_settings().default_length == 5


@pytest.mark.parametrize(
    'env',
    [
        {'PASSGEN_LOG_LEVEL': 'LOUD'},
        {'PASSGEN_DEFAULT_LENGTH': 'eight'},
        {'PASSGEN_DEFAULT_LENGTH': '3'},
        {'PASSGEN_DEFAULT_LENGTH': '13'},
        {'PASSGEN_DEFAULT_LENGTH': '\u00b2'},
        {'PASSGEN_DEFAULT_LENGTH': '-5'},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(env)

    assert excinfo.value.code == 'INVALID_SETTING'


def test_setup_logging_adds_one_handler():
    logger = setup_logging(logging.INFO)
    count = len(logger.handlers)

    setup_logging(logging.DEBUG)

    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG
    assert sum(h.get_name() == HANDLER_NAME for h in logger.handlers) == 1
