from .character_pool import build_alphabet, class_count
from .errors import ConfigurationError, PassgenError, PasswordGenerationError
from .models import (
    DEFAULT_CLASSES,
    CharacterClass,
    GeneratedPassword,
    GenerationError,
    GenerationRequest,
    GenerationResult,
)
from .password_generator import PasswordEngine, generate_password
from .strength import StrengthLevel, score, strength_label, strength_percent

__all__ = [
    'CharacterClass',
    'ConfigurationError',
    'DEFAULT_CLASSES',
    'GeneratedPassword',
    'GenerationError',
    'GenerationRequest',
    'GenerationResult',
    'PassgenError',
    'PasswordEngine',
    'PasswordGenerationError',
    'StrengthLevel',
    'build_alphabet',
    'class_count',
    'generate_password',
    'score',
    'strength_label',
    'strength_percent',
]
