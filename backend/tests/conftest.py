import random

import pytest

from app.config import EngineSettings
from app.main import app
from routes.games import get_registry
from services.registry import GameRegistry


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(max_ship_size=4, forbid_adjacent=True, placement_attempts=200, placement_restarts=5)


@pytest.fixture
def registry(settings: EngineSettings) -> GameRegistry:
    """Isolated registry wired into the app in place of the module default."""
    registry = GameRegistry(settings=settings, rng=random.Random(1234))
    app.dependency_overrides[get_registry] = lambda: registry
    yield registry
    app.dependency_overrides.pop(get_registry, None)
