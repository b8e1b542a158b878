"""
Exception hierarchy for passgen callers.

The engine itself reports bad input through ``GenerationResult`` values.
These exceptions exist for the boundary where a caller wants to turn a
failed result into a raise, and for configuration loading.

PassgenError
├── PasswordGenerationError
└── ConfigurationError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import GenerationError


class PassgenError(Exception):
    """Base exception for all passgen errors."""

    def __init__(self, message: str = '', *, code: str = '', detail: str = '') -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f'{self.message} | {self.detail}'
        return self.message


class PasswordGenerationError(PassgenError, ValueError):
    """Raised when a failed generation result is unwrapped."""

    def __init__(self, kind: GenerationError, *, detail: str = '') -> None:
        super().__init__(kind.message, code=kind.name, detail=detail)
        self.kind = kind


class ConfigurationError(PassgenError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(
            f'Invalid value for {name}: {value!r}',
            code='INVALID_SETTING',
            detail=reason,
        )
        self.name = name
        self.value = value
