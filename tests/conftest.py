import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)


class ScriptedRandom(random.Random):
    """Random whose ``random()`` replays a fixed list; choice/shuffle stay seeded."""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self._values = list(values)

    # Defining getrandbits keeps choice()/shuffle() off the scripted random() values.
    def getrandbits(self, k):
        return super().getrandbits(k)

    def random(self):
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def scripted_rng():
    return ScriptedRandom


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation time guardrails")


@pytest.fixture(autouse=True)
def _isolate_environment():
    """Drop PCG_* vars and restore os.environ afterwards (.env loading writes to it directly)."""
    saved = dict(os.environ)
    for key in list(os.environ):
        if key.startswith("PCG_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(saved)
