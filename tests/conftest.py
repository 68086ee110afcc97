"""
Pytest configuration and shared fixtures for test isolation.
"""
import pytest


# Reset global state between tests
@pytest.fixture(autouse=True)
def reset_global_state():
    """Clear the process-wide registry and restore config defaults around each test."""
    from aios_brain.config import Config
    from aios_brain.registry import service_manager

    saved_config = Config.to_dict()
    service_manager.clear()

    yield

    service_manager.clear()
    Config.from_dict(saved_config, apply_env_overrides=False)


@pytest.fixture
def brain():
    """A fresh, active knowledge store."""
    from aios_brain.store import KnowledgeStore
    return KnowledgeStore()


@pytest.fixture
def test_client():
    """TestClient with lifespan run, so the brain is booted and registered."""
    from fastapi.testclient import TestClient
    from aios_brain.server import app

    with TestClient(app) as client:
        yield client
