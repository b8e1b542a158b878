from __future__ import annotations

import logging

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set

from .core.models import (
    DEFAULT_CLASSES,
    CharacterClass,
    GeneratedPassword,
    GenerationError,
    GenerationRequest,
)
from .core.password_generator import PasswordEngine

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = 'idle'
    GENERATED = 'generated'


@dataclass
class GeneratorSession:
    """
    Caller-side state for one interactive generator.

    Holds the class toggles and the last generated password. The engine
    is handed a fresh GenerationRequest on every submit and keeps nothing
    itself.
    """

    engine: PasswordEngine = field(default_factory=PasswordEngine)
    enabled_classes: Set[CharacterClass] = field(
        default_factory=lambda: set(DEFAULT_CLASSES),
    )
    state: SessionState = SessionState.IDLE
    generated: Optional[GeneratedPassword] = None

    @property
    def password(self) -> str:
        return self.generated.text if self.generated else ''

    @property
    def strength(self) -> float:
        return self.generated.strength if self.generated else 0.0

    def is_enabled(self, char_class: CharacterClass) -> bool:
        return char_class in self.enabled_classes

    def toggle(self, char_class: CharacterClass) -> bool:
        """
        Flip a character class on or off.

        Returns:
            True if the class is enabled after the toggle.
        """
        if char_class in self.enabled_classes:
            self.enabled_classes.discard(char_class)
            return False

        self.enabled_classes.add(char_class)
        return True

    def submit(self, length: int) -> Optional[GenerationError]:
        """
        Generate a password for the current toggles.

        On success the session moves to GENERATED. On failure the state
        and any previous password are left untouched.

        Returns:
            None on success, otherwise the reason generation was refused.
        """
        request = GenerationRequest(length=length, enabled_classes=frozenset(self.enabled_classes))
        result = self.engine.create(request)

        if not result.ok:
            return result.error

        self.generated = result.unwrap()
        self.state = SessionState.GENERATED
        return None

    def reset(self) -> None:
        """Clear the password and restore the default class selection."""
        self.generated = None
        self.enabled_classes = set(DEFAULT_CLASSES)
        self.state = SessionState.IDLE
        logger.debug('Session reset')
