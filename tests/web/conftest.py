"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from waypoint_sim.web.app import app

_ENV_KEYS = (
    "TARGET_SPEED", "MASS", "FRICTION", "FRICTION_ACTIVE", "FRICTION_START",
    "FRICTION_END", "AIR_RESISTANCE", "GRID_SCALE", "ENGINE_GAIN", "DESTINATION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from any WAYPOINT_SIM_* variables in the environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv("WAYPOINT_SIM_" + key, raising=False)


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c
