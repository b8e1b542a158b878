import pytest

from passgen.core.models import CharacterClass, GenerationError
from passgen.session import GeneratorSession, SessionState


def test_defaults():
    session = GeneratorSession()

    assert session.state is SessionState.IDLE
    assert session.enabled_classes == {CharacterClass.LOWERCASE}
    assert session.password == ''
    assert session.strength == 0.0


def test_submit_moves_to_generated(seeded_engine):
    session = GeneratorSession(engine=seeded_engine)

    assert session.submit(8) is None
    assert session.state is SessionState.GENERATED
    assert len(session.password) == 8
    assert session.password.islower()
    assert session.strength == pytest.approx(20.0)


def test_toggle_flips_classes():
    session = GeneratorSession()

    assert session.toggle(CharacterClass.SYMBOL) is True
    assert session.is_enabled(CharacterClass.SYMBOL)
    assert session.toggle(CharacterClass.SYMBOL) is False
    assert not session.is_enabled(CharacterClass.SYMBOL)


def test_failed_submit_keeps_previous_password(seeded_engine):
    session = GeneratorSession(engine=seeded_engine)
    session.submit(6)
    previous = session.password

    assert session.submit(3) is GenerationError.INVALID_LENGTH
    assert session.password == previous
    assert session.state is SessionState.GENERATED


def test_submit_with_no_classes():
    session = GeneratorSession()
    session.toggle(CharacterClass.LOWERCASE)

    assert session.submit(8) is GenerationError.EMPTY_ALPHABET
    assert session.state is SessionState.IDLE


def test_reset_restores_defaults(seeded_engine):
    session = GeneratorSession(engine=seeded_engine)
    session.toggle(CharacterClass.DIGIT)
    session.toggle(CharacterClass.UPPERCASE)
    session.submit(12)

    session.reset()

    assert session.state is SessionState.IDLE
    assert session.password == ''
    assert session.strength == 0.0
    assert session.enabled_classes == {CharacterClass.LOWERCASE}


def test_sessions_do_not_share_toggles():
    first = GeneratorSession()
    second = GeneratorSession()
    first.toggle(CharacterClass.DIGIT)

    assert not second.is_enabled(CharacterClass.DIGIT)
