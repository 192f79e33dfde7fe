# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core import db
from main import app

from .fakes import FakeTaskStore


@pytest.fixture()
def store(monkeypatch: pytest.MonkeyPatch) -> FakeTaskStore:
    """
    Fake tasks table wired in place of the real pool.

    Any statement that reaches `core.db.query` lands here instead.
    """
    fake = FakeTaskStore()
    monkeypatch.setattr(db, "query", fake.query)
    return fake


@pytest.fixture()
def client(store: FakeTaskStore) -> TestClient:
    # Not used as a context manager, so the lifespan (and the real pool) never starts.
    return TestClient(app)
