from __future__ import annotations

import logging
import os

from dataclasses import dataclass
from typing import Final, Mapping, Optional

from .errors import ConfigurationError

MIN_LENGTH: Final[int] = 4
MAX_LENGTH: Final[int] = 12
DEFAULT_LENGTH: Final[int] = 8

# Scoring: every class enabled at this length is a full score of 100.
MAX_CLASSES: Final[int] = 4
FULL_STRENGTH_LENGTH: Final[int] = 10

LOG_LEVEL_ENV: Final[str] = 'PASSGEN_LOG_LEVEL'
DEFAULT_LENGTH_ENV: Final[str] = 'PASSGEN_DEFAULT_LENGTH'

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the command-line front end."""

    log_level: str = 'WARNING'
    default_length: int = DEFAULT_LENGTH

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Settings with any overrides applied.

    Raises:
        ConfigurationError: If a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    log_level = env.get(LOG_LEVEL_ENV, '').strip().upper() or defaults.log_level
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            LOG_LEVEL_ENV,
            log_level,
            f'expected one of {", ".join(_LOG_LEVELS)}',
        )

    raw_length = env.get(DEFAULT_LENGTH_ENV, '').strip()
    default_length = defaults.default_length
    if raw_length:
        try:
            default_length = int(raw_length)
        except ValueError as exc:
            raise ConfigurationError(DEFAULT_LENGTH_ENV, raw_length, 'expected an integer') from exc
        if not MIN_LENGTH <= default_length <= MAX_LENGTH:
            raise ConfigurationError(
                DEFAULT_LENGTH_ENV,
                raw_length,
                f'expected a value between {MIN_LENGTH} and {MAX_LENGTH}',
            )

    return Settings(log_level=log_level, default_length=default_length)
