import os
import sys
from pathlib import Path
import pytest
from fastapi.testclient import TestClient

# Ensure repository root is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Default test environment
os.environ.setdefault("LOG_LEVEL", "debug")

from result_envelope.main import app  # noqa: E402


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c
