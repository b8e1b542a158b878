from __future__ import annotations

from typing import Iterable, Tuple

from .models import CharacterClass

# Concatenation order for the alphabet. Sampling is by uniform index, so
# the order only has to be stable.
POOL_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


def build_alphabet(enabled_classes: Iterable[CharacterClass]) -> str:
    """
    Concatenate the alphabets of the enabled character classes.

    Args:
        enabled_classes: Any subset of CharacterClass, possibly empty.

    Returns:
        The combined alphabet. An empty string when nothing is enabled;
        rejecting that is left to the generator.
    """
    enabled = set(enabled_classes)
    characters = ''

    for char_class in POOL_ORDER:
        if char_class in enabled:
            characters += char_class.alphabet

    return characters


def class_count(enabled_classes: Iterable[CharacterClass]) -> int:
    """Return the number of distinct enabled classes."""
    return len(set(enabled_classes))
