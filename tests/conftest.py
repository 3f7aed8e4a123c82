import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from string_analyzer.main import create_app
from string_analyzer.store import StringStore


@pytest.fixture
def store():
    """Fresh, empty store per test."""

    return StringStore()


@pytest.fixture
def seeded_store(store):
    """Store holding a small mix of palindromes and ordinary strings."""

    for value in (
        "racecar",
        "hello world",
        "A man, a plan, a canal: Panama",
        "noon",
        "pizza",
        "level up",
        "Was it a car or a cat I saw",
    ):
        store.insert(value)
    return store


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
