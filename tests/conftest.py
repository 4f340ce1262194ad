import json
import random
import pytest
from os.path import dirname, abspath


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def example_path() -> str:
    """Share document with n=4, k=3 and constant term 3 (y = x^2 + 3)."""
    return dirname(abspath(__file__)) + r"/shares_example.json"


@pytest.fixture
def example_document(example_path) -> dict:
    with open(example_path, 'r') as fs:
        return json.load(fs)


@pytest.fixture
def fractional_document() -> dict:
    """Line through (1,2) and (3,3): y = x/2 + 3/2."""
    return {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "2"},
        "3": {"base": "2", "value": "11"},
    }


@pytest.fixture
def write_document(tmp_path):
    """Write a document dict to a temporary JSON file and return its path."""

    def _write(document, name="shares.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return str(path)

    return _write
