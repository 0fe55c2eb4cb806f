from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from threading import Lock

from .ship import Ship


class CellState(StrEnum):
    UNKNOWN = "unknown"
    MISS = "miss"
    HIT = "hit"


class ProbeResult(IntEnum):
    """Codes returned when probing a cell (sent as plain integers over the wire)."""

    MISS = -1
    HIT = -2
    SUNK = -3
    ALREADY_PROBED = -4


@dataclass
class Game:
    rows: int
    columns: int
    ship_count: int
    ships: list[Ship]
    grid: list[list[CellState]] = field(default_factory=list)
    # Guards grid and ship hit counters; probes on one game are serialized.
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[CellState.UNKNOWN] * self.columns for _ in range(self.rows)]

    @property
    def all_sunk(self) -> bool:
        return bool(self.ships) and all(ship.sunk for ship in self.ships)

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns
