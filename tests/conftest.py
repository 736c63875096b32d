"""
pytest configuration and fixtures.
"""

import pytest

from textfile_service import create_app

BASE = "/textfile-api"


@pytest.fixture
def storage_dir(tmp_path):
    """Storage root inside a scratch directory, so escapes can be detected."""
    root = tmp_path / "storage"
    root.mkdir()
    return root


@pytest.fixture
def app(storage_dir):
    return create_app({
        "TESTING": True,
        "STORAGE_DIR": str(storage_dir),
        "BASE_URL": BASE,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def api(client):
    """Issue ``GET {BASE}/<route>`` with the given query parameters."""
    def call(route, **params):
        return client.get(f"{BASE}/{route}", query_string=params)
    return call
