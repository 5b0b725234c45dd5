import os, sys
import pytest
from fastapi.testclient import TestClient

# Ensure app import path
# backend root first on sys.path so the local voice_agenda package wins
backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

from voice_agenda.main import app  # noqa: E402


@pytest.fixture(scope="function")
def client():
    return TestClient(app)
