from __future__ import annotations

import sys

from .core.config import Settings, load_settings
from .core.errors import ConfigurationError
from .core.models import CharacterClass
from .core.strength import strength_label, strength_percent
from .logging_config import setup_logging
from .session import GeneratorSession

CLASS_LABELS = {
    CharacterClass.LOWERCASE: 'Lowercase',
    CharacterClass.UPPERCASE: 'Uppercase',
    CharacterClass.DIGIT: 'Numbers',
    CharacterClass.SYMBOL: 'Symbols',
}

TOGGLE_KEYS = {
    'l': CharacterClass.LOWERCASE,
    'u': CharacterClass.UPPERCASE,
    'n': CharacterClass.DIGIT,
    's': CharacterClass.SYMBOL,
}


def action_generate_password(session: GeneratorSession, settings: Settings) -> None:
    """Prompt for a length, generate a password, and display it."""
    length_input = input(f'Length (default {settings.default_length}): ').strip()
    length = settings.default_length

    if length_input:
        try:
            length = int(length_input)
        except ValueError:
            print('[!] Length must be a whole number.\n')
            return

    error = session.submit(length)
    if error is not None:
        print(f'[!] {error.message}\n')
        return

    percent = strength_percent(session.strength)
    label = strength_label(session.strength).value
    print('Generated password:', session.password)
    print(f'Password strength: {percent}% ({label})\n')


def action_toggle_classes(session: GeneratorSession) -> None:
    """Flip one character class on or off."""
    for key, char_class in TOGGLE_KEYS.items():
        print(f' {key}) {CLASS_LABELS[char_class]}')

    choice = input('Toggle which class? ').strip().lower()
    char_class = TOGGLE_KEYS.get(choice)

    if char_class is None:
        print('[!] Unknown class.\n')
        return

    enabled = session.toggle(char_class)
    state = 'enabled' if enabled else 'disabled'
    print(f'[+] {CLASS_LABELS[char_class]} {state}.\n')


def action_show_classes(session: GeneratorSession) -> None:
    """List every character class and whether it is enabled."""
    print('Character classes:')
    for char_class, label in CLASS_LABELS.items():
        mark = 'x' if session.is_enabled(char_class) else ' '
        print(f' [{mark}] {label}')
    print()


def action_reset(session: GeneratorSession) -> None:
    """Clear the password and restore the default classes."""
    session.reset()
    print('[+] Reset to defaults.\n')


def show_menu() -> str:
    """Print the main menu and return the user's choice."""
    print('===== Password Generator =====')
    print('1) Generate password')
    print('2) Toggle character class')
    print('3) Show character classes')
    print('4) Reset')
    print('5) Quit')
    return input('Select an option: ').strip()


def main() -> None:
    """Main entry point for the CLI."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f'[!] {exc}')
        sys.exit(1)

    setup_logging(settings.log_level_value)
    session = GeneratorSession()

    while True:
        choice = show_menu()
        print()

        if choice == '1':
            action_generate_password(session, settings)
        elif choice == '2':
            action_toggle_classes(session)
        elif choice == '3':
            action_show_classes(session)
        elif choice == '4':
            action_reset(session)
        elif choice == '5':
            print('Goodbye.')
            sys.exit(0)
        else:
            print('Invalid selection.\n')


if __name__ == '__main__':
    main()
