from __future__ import annotations

import logging
import random

from dataclasses import dataclass
from typing import Callable, Iterable

from .character_pool import build_alphabet
from .config import MAX_LENGTH, MIN_LENGTH
from .models import (
    CharacterClass,
    GeneratedPassword,
    GenerationError,
    GenerationRequest,
    GenerationResult,
)
from .strength import score

logger = logging.getLogger(__name__)


def is_valid_length(length: object) -> bool:
    """Return True if length is an int within the accepted bounds."""
    if isinstance(length, bool) or not isinstance(length, int):
        return False
    return MIN_LENGTH <= length <= MAX_LENGTH


@dataclass(frozen=True)
class PasswordEngine:
    """
    Generate random passwords and score them.

    The engine keeps no state between calls. Each generation asks
    ``rng_factory`` for a fresh random source, so instances can be shared
    between threads without locking.
    """

    rng_factory: Callable[[], random.Random] = random.SystemRandom

    def generate(self, alphabet: str, length: int) -> GenerationResult[str]:
        """
        Draw ``length`` characters uniformly from ``alphabet``.

        Args:
            alphabet: Characters to sample from.
            length: Number of characters, between MIN_LENGTH and MAX_LENGTH.

        Returns:
            A result holding the password, or INVALID_LENGTH / EMPTY_ALPHABET.
        """
        if not is_valid_length(length):
            logger.info('Rejected password length %r', length)
            return GenerationResult.failure(GenerationError.INVALID_LENGTH)

        if not alphabet:
            logger.info('Rejected generation with no character classes enabled')
            return GenerationResult.failure(GenerationError.EMPTY_ALPHABET)

        rng = self.rng_factory()
        size = len(alphabet)
        password = ''.join(alphabet[rng.randrange(size)] for _ in range(length))

        logger.debug('Generated %d characters from an alphabet of %d', length, size)
        return GenerationResult.success(password)

    def score(self, enabled_classes: Iterable[CharacterClass], length: int) -> float:
        """Return the strength score for the given classes and length."""
        return score(enabled_classes, length)

    def create(self, request: GenerationRequest) -> GenerationResult[GeneratedPassword]:
        """
        Run a full request: build the alphabet, generate, and score.

        Returns:
            A result holding the GeneratedPassword, or the generation error.
        """
        alphabet = build_alphabet(request.enabled_classes)
        result = self.generate(alphabet, request.length)

        if not result.ok:
            return GenerationResult.failure(result.error)  # type: ignore[arg-type]

        return GenerationResult.success(
            GeneratedPassword(
                text=result.unwrap(),
                strength=self.score(request.enabled_classes, request.length),
            ),
        )


DEFAULT_ENGINE = PasswordEngine()


def generate_password(
    enabled_classes: Iterable[CharacterClass],
    length: int,
) -> GenerationResult[str]:
    """
    Generate a password from the enabled classes using the default engine.

    Returns:
        A result holding the password text or the reason it was refused.
    """
    return DEFAULT_ENGINE.generate(build_alphabet(enabled_classes), length)
