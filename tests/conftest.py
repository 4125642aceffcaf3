"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.settings import Settings


@pytest.fixture
def version_file(tmp_path):
    path = tmp_path / "VERSION"
    path.write_text("1.2.3\n", encoding="utf-8")
    return path


@pytest.fixture
def make_client():
    """Build a TestClient whose settings point at the given VERSION file."""

    def _make(path):
        return TestClient(create_app(Settings(version_file=path)))

    return _make


@pytest.fixture
def client(make_client, version_file):
    return make_client(version_file)
