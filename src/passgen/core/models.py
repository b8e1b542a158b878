from __future__ import annotations

import string

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Generic, Optional, TypeVar

from .config import MAX_LENGTH, MIN_LENGTH
from .errors import PasswordGenerationError

T = TypeVar('T')


class CharacterClass(Enum):
    """A fixed category of characters that can be enabled for generation."""

    LOWERCASE = string.ascii_lowercase
    UPPERCASE = string.ascii_uppercase
    DIGIT = string.digits
    SYMBOL = '!@#$%^&*()_+[]{}|;:,.<>?/~`'

    @property
    def alphabet(self) -> str:
        """Return the literal characters belonging to this class."""
        return self.value


DEFAULT_CLASSES: FrozenSet[CharacterClass] = frozenset({CharacterClass.LOWERCASE})


class GenerationError(Enum):
    """Why a generation request was refused."""

    EMPTY_ALPHABET = 'empty_alphabet'
    INVALID_LENGTH = 'invalid_length'

    @property
    def message(self) -> str:
        if self is GenerationError.EMPTY_ALPHABET:
            return 'At least one character set must be enabled.'
        return (
            f'It should be a minimum of {MIN_LENGTH} '
            f'and a maximum of {MAX_LENGTH} characters.'
        )


@dataclass(frozen=True)
class GenerationRequest:
    """Inputs to a single generation."""

    length: int
    enabled_classes: FrozenSet[CharacterClass] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Callers may hand in a set or list; store an immutable copy.
        object.__setattr__(self, 'enabled_classes', frozenset(self.enabled_classes))


@dataclass(frozen=True)
class GeneratedPassword:
    """A generated password together with its strength score."""

    text: str
    strength: float

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class GenerationResult(Generic[T]):
    """
    Outcome of a generation call: exactly one of ``value`` or ``error``.

    Engine operations return this instead of raising, so callers must
    check ``ok`` (or call ``unwrap``) before using the value.
    """

    value: Optional[T] = None
    error: Optional[GenerationError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError('GenerationResult needs exactly one of value or error.')

    @classmethod
    def success(cls, value: T) -> GenerationResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: GenerationError) -> GenerationResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value or raise.

        Raises:
            PasswordGenerationError: If the result holds an error.
        """
        if self.error is not None:
            raise PasswordGenerationError(self.error)
        return self.value  # type: ignore[return-value]
