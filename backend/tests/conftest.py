import pytest
from fastapi.testclient import TestClient

from rms_bracket.main import app
from tests.bracket_factory import make_single_elimination


@pytest.fixture(name="elimination_snapshot")
def elimination_snapshot_fixture():
    """SF1/SF2 feeding an unresolved final"""
    return make_single_elimination()


@pytest.fixture(name="client")
def client_fixture():
    """Provide a test client for the bracket API

    The API is stateless, so no dependency overrides are needed.
    """
    with TestClient(app) as client:
        yield client
