"""
Password suggestion engine.

Builds passwords from selected character classes and reports a
heuristic strength score.
"""

from .core import (
    CharacterClass,
    GeneratedPassword,
    GenerationError,
    GenerationRequest,
    GenerationResult,
    PasswordEngine,
    build_alphabet,
    generate_password,
    score,
)

__all__ = [
    'CharacterClass',
    'GeneratedPassword',
    'GenerationError',
    'GenerationRequest',
    'GenerationResult',
    'PasswordEngine',
    'build_alphabet',
    'generate_password',
    'score',
]
