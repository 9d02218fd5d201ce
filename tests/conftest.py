"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from metacog.server import MetacogServer  # noqa: E402


@pytest.fixture
def server_config():
    """Server configuration for testing."""
    return {
        "name": "test-metacog",
        "version": "0.6.0",
        "transport": {"type": "stdio"},
        "logging": {"level": "ERROR", "format": "text"},  # Reduce log noise
    }


@pytest.fixture
def test_server(server_config):
    """Create test server instance."""
    return MetacogServer(server_config)
