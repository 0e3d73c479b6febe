import pytest

from shared.config import KeysmithConfig
from keysmith.analyzers.strength import StrengthAnalyzer
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import InvalidConfigurationError
from keysmith.core.models import CharacterClass, SecretKind, StrengthLevel
from keysmith.generators.charsets import DIGITS, LETTERS
from keysmith.output import clipboard


def test_default_policies():
    engine = KeysmithEngine(seed=0)
    policy = engine.password_policy()
    assert policy.length == 12
    assert not policy.include_numbers and not policy.include_symbols
    assert engine.pin_policy().length == 4
    assert engine.pin_policy(9).length == 9


def test_config_defaults_enable_classes():
    config = KeysmithConfig()
    config.generator.include_numbers = True
    config.generator.password_length = 30
    policy = KeysmithEngine(config, seed=0).password_policy(symbols=True)
    assert policy.length == 30
    assert policy.active_classes() == (
        CharacterClass.LETTERS, CharacterClass.DIGITS, CharacterClass.SYMBOLS,
    )


@pytest.mark.parametrize("field, value", [("password_length", 7), ("pin_length", 13)])
def test_invalid_config_default(field, value):
    config = KeysmithConfig()
    setattr(config.generator, field, value)
    engine = KeysmithEngine(config, seed=0)
    with pytest.raises(InvalidConfigurationError):
        engine.password_policy() if field == "password_length" else engine.pin_policy()


def test_generate_password():
    engine = KeysmithEngine(seed=0)
    secret = engine.generate_password(engine.password_policy(10))
    assert secret.kind is SecretKind.PASSWORD
    assert secret.length == 10
    assert secret.seed == 0
    assert secret.classes == (CharacterClass.LETTERS,)
    assert len(secret.value) == 10
    assert all(c in LETTERS for c in secret.value)


def test_generate_pin():
    engine = KeysmithEngine(seed=5)
    secret = engine.generate_pin(engine.pin_policy(6))
    assert secret.kind is SecretKind.PIN
    assert len(secret.value) == 6
    assert all(c in DIGITS for c in secret.value)


def test_engines_with_same_seed_agree():
    results = []
    for _ in range(2):
        engine = KeysmithEngine(seed=42)
        results.append((
            engine.generate_password(engine.password_policy(16, True, True)).value,
            engine.generate_pin(engine.pin_policy(8)).value,
        ))
    assert results[0] == results[1]


def test_unseeded_engine():
    engine = KeysmithEngine()
    secret = engine.generate_password(engine.password_policy(20, numbers=True))
    assert secret.seed is None
    assert len(secret.value) == 20


def test_invalid_seed():
    with pytest.raises(InvalidConfigurationError):
        KeysmithEngine(seed=-5)


def test_analyze_and_copy(monkeypatch, fake_scorer):
    copied = []
    monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)
    engine = KeysmithEngine(seed=0, analyzer=StrengthAnalyzer(scorer=fake_scorer))
    secret = engine.generate_pin(engine.pin_policy())

    report = engine.analyze(secret)
    assert report.strength is StrengthLevel.STRONG
    assert fake_scorer.calls == [secret.value]

    engine.copy(secret)
    assert copied == [secret.value]
