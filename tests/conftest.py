"""
- Keep every test independent of the developer's shell / .env settings
- Provide a scripted random source so answer generation is deterministic
- Provide a fresh in-memory store per test
"""
import os
import pytest

os.environ.setdefault("APP_ENV", "test")

from equatle.store import GameStore


class ScriptedRandom:
    """
    Stand-in for random.Random: randrange(n) hands out the scripted values
    in order. Running out means the code drew more often than the test expected.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, n):
        if not self.values:
            raise AssertionError("ScriptedRandom ran out of values")
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} not in range({n})"
        self.calls.append(n)
        return value


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start each test with no equatle settings in the environment."""
    monkeypatch.delenv("EQUATLE_DIFFICULTY", raising=False)
    monkeypatch.delenv("EQUATLE_SEED", raising=False)
    monkeypatch.setenv("APP_ENV", "test")
    yield


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def store():
    return GameStore()
