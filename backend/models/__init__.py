from .errors import (
    GameError,
    GameNotFound,
    InvalidDimensions,
    NotFound,
    OutOfBounds,
    ShipNotFound,
    UnplaceableFleet,
)
from .game import CellState, Game, ProbeResult
from .ship import DESCRIPTOR_SEPARATOR, Orientation, Ship

__all__ = [
    "Game",
    "CellState",
    "ProbeResult",
    "Ship",
    "Orientation",
    "DESCRIPTOR_SEPARATOR",
    "GameError",
    "InvalidDimensions",
    "UnplaceableFleet",
    "NotFound",
    "GameNotFound",
    "ShipNotFound",
    "OutOfBounds",
]
