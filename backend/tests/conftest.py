"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import pytest

# Add backend to path
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from dataplot.application import create_app  # noqa: E402
from dataplot.config import Settings  # noqa: E402
from dataplot.expvars import new_registry  # noqa: E402


@pytest.fixture
def sample_series_path():
    """Path to sample_series.txt."""
    return Path(__file__).parent.parent.parent / "examples" / "sample_series.txt"


@pytest.fixture
def sample_config_path():
    """Path to the sample server.conf."""
    return Path(__file__).parent.parent.parent / "examples" / "server.conf"


@pytest.fixture
def client_dir(tmp_path):
    """Client directory holding only the visualisation page."""
    directory = tmp_path / "client"
    directory.mkdir()
    (directory / "viz.html").write_text("<html><body>viz</body></html>", encoding="utf-8")
    return directory


@pytest.fixture
def settings(client_dir):
    """Settings pointing at the temporary client directory."""
    return Settings(client_dir=client_dir)


@pytest.fixture
def app(settings):
    """Application with its own introspection registry."""
    return create_app(settings, registry=new_registry())
