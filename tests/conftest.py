# tests/conftest.py
import os, sys
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from assistant.conversation import ConversationEngine


@pytest.fixture
def engine():
    return ConversationEngine()

@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from api.server import app
    # context manager -> odpala lifespan (SessionStore)
    with TestClient(app) as c:
        yield c
