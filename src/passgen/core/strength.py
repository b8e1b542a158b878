from __future__ import annotations

import math

from enum import Enum
from typing import Iterable

from .character_pool import class_count
from .config import FULL_STRENGTH_LENGTH, MAX_CLASSES
from .models import CharacterClass


class StrengthLevel(Enum):
    """Coarse band a strength score falls into."""

    WEAK = 'weak'
    MEDIUM = 'medium'
    STRONG = 'strong'


def score(enabled_classes: Iterable[CharacterClass], length: int) -> float:
    """
    Estimate password strength from class diversity and length.

    The result is ``(classes / 4) * (length / 10) * 100``. It is not
    clamped, so lengths above 10 can score above 100.

    Args:
        enabled_classes: Character classes used for generation.
        length: Requested password length.

    Returns:
        The strength score.
    """
    return (class_count(enabled_classes) / MAX_CLASSES) * (length / FULL_STRENGTH_LENGTH) * 100


def strength_percent(strength: float) -> int:
    """Return the score rounded for display, with halves rounded up."""
    return math.floor(strength + 0.5)


def strength_label(strength: float) -> StrengthLevel:
    if strength > 70:
        return StrengthLevel.STRONG
    if strength > 40:
        return StrengthLevel.MEDIUM
    return StrengthLevel.WEAK
