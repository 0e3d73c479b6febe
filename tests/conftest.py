from pathlib import Path

import pytest

from shared import config as config_module
from keysmith.generators.random_source import BaseRandomSource, SeededRandomSource


class ScriptedSource(BaseRandomSource):
    """Random source replaying a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def uniform_int(self, low, high):
        self.calls.append((low, high))
        return self.draws.pop(0)


def fake_zxcvbn_result(score=3, guesses_log10=10.4):
    keys = [
        "online_throttling_100_per_hour",
        "online_no_throttling_10_per_second",
        "offline_slow_hashing_1e4_per_second",
        "offline_fast_hashing_1e10_per_second",
    ]
    return {
        "score": score,
        "guesses_log10": guesses_log10,
        "crack_times_seconds": {k: float(10 ** i) for i, k in enumerate(keys)},
        "crack_times_display": {
            keys[0]: "centuries",
            keys[1]: "3 years",
            keys[2]: "1 day",
            keys[3]: "less than a second",
        },
    }


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    """Keep a real ~/.keysmith/config.toml from leaking into tests."""
    monkeypatch.setattr(
        config_module, "_DEFAULT_CONFIG_PATH", Path(tmp_path / "absent.toml")
    )


@pytest.fixture
def rng():
    return SeededRandomSource(0)


@pytest.fixture
def fake_scorer():
    calls = []

    def scorer(secret):
        calls.append(secret)
        return fake_zxcvbn_result()

    scorer.calls = calls
    return scorer
