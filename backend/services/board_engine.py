"""Board engine: random fleet placement and per-cell probing for a single game."""

from __future__ import annotations

import logging
import random

from app.config import EngineSettings, get_engine_settings
from models import (
    CellState,
    Game,
    InvalidDimensions,
    Orientation,
    OutOfBounds,
    ProbeResult,
    Ship,
    ShipNotFound,
    UnplaceableFleet,
)

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

_NEIGHBOURHOOD = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]


def ship_size_for(index: int, rows: int, columns: int, max_ship_size: int) -> int:
    """
    Size of the ship with the given index.

    Sizes cycle 1, 2, ..., k, 1, 2, ... where k is max_ship_size capped by the
    longest side of the board, so every ship fits in at least one orientation.
    """
    cycle = max(1, min(max_ship_size, max(rows, columns)))
    return index % cycle + 1


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _random_candidate(rng: random.Random, size: int, rows: int, columns: int) -> Ship:
    orientations = []
    if size <= columns:
        orientations.append(Orientation.HORIZONTAL)
    if size <= rows:
        orientations.append(Orientation.VERTICAL)
    orientation = rng.choice(orientations)
    if orientation is Orientation.HORIZONTAL:
        row = rng.randrange(rows)
        column = rng.randrange(columns - size + 1)
    else:
        row = rng.randrange(rows - size + 1)
        column = rng.randrange(columns)
    return Ship(row=row, column=column, orientation=orientation, size=size)


def _collides(cells: list[Cell], occupied: set[Cell], forbid_adjacent: bool) -> bool:
    if not forbid_adjacent:
        return any(cell in occupied for cell in cells)
    return any((r + dr, c + dc) in occupied for r, c in cells for dr, dc in _NEIGHBOURHOOD)


def _place_fleet(
    rows: int,
    columns: int,
    ship_count: int,
    settings: EngineSettings,
    rng: random.Random,
) -> tuple[list[Ship] | None, int]:
    """One greedy layout pass. Returns (ships or None on dead end, attempts used)."""
    occupied: set[Cell] = set()
    ships: list[Ship] = []
    attempts = 0
    for index in range(ship_count):
        size = ship_size_for(index, rows, columns, settings.max_ship_size)
        for _ in range(settings.placement_attempts):
            attempts += 1
            candidate = _random_candidate(rng, size, rows, columns)
            cells = candidate.cells()
            if _collides(cells, occupied, settings.forbid_adjacent):
                continue
            occupied.update(cells)
            ships.append(candidate)
            break
        else:
            return None, attempts
    return ships, attempts


def create_game(
    rows: int,
    columns: int,
    ship_count: int,
    *,
    settings: EngineSettings | None = None,
    rng: random.Random | None = None,
) -> Game:
    """
    Build a new game with ship_count randomly placed ships.

    Raises InvalidDimensions for non-positive arguments or a board larger than
    settings.max_cells, and UnplaceableFleet when no valid layout is found
    within the configured attempt budget.
    """
    if not (_is_positive_int(rows) and _is_positive_int(columns) and _is_positive_int(ship_count)):
        raise InvalidDimensions(rows, columns, ship_count)

    settings = settings or get_engine_settings()
    if rows * columns > settings.max_cells:
        raise InvalidDimensions(
            rows, columns, ship_count, reason=f"board may not exceed {settings.max_cells} cells"
        )
    rng = rng or random.Random()

    total_attempts = 0
    for layout in range(settings.placement_restarts):
        ships, attempts = _place_fleet(rows, columns, ship_count, settings, rng)
        total_attempts += attempts
        if ships is not None:
            logger.debug(
                "[board_engine] Placed %d ships on %dx%d after %d layouts (%d attempts)",
                ship_count,
                rows,
                columns,
                layout + 1,
                total_attempts,
            )
            return Game(rows=rows, columns=columns, ship_count=ship_count, ships=ships)

    logger.warning(
        "[board_engine] Gave up placing %d ships on %dx%d (forbid_adjacent=%s, attempts=%d)",
        ship_count,
        rows,
        columns,
        settings.forbid_adjacent,
        total_attempts,
    )
    raise UnplaceableFleet(rows, columns, ship_count, total_attempts)


def _ship_at(game: Game, row: int, column: int) -> tuple[int, Ship] | None:
    for ship_id, ship in enumerate(game.ships):
        if (row, column) in ship.cells():
            return ship_id, ship
    return None


def probe_cell(game: Game, row: int, column: int) -> ProbeResult:
    """
    Reveal one cell. Only the first probe of a cell changes state; later probes
    return ALREADY_PROBED.
    """
    if not game.in_bounds(row, column):
        raise OutOfBounds(row, column, game.rows, game.columns)

    with game.lock:
        if game.grid[row][column] is not CellState.UNKNOWN:
            return ProbeResult.ALREADY_PROBED

        found = _ship_at(game, row, column)
        if found is None:
            game.grid[row][column] = CellState.MISS
            return ProbeResult.MISS

        ship_id, ship = found
        game.grid[row][column] = CellState.HIT
        ship.hits_received += 1
        if not ship.sunk:
            return ProbeResult.HIT

        logger.info("[board_engine] Ship %d (size %d) sunk", ship_id, ship.size)
        if game.all_sunk:
            logger.info("[board_engine] All %d ships sunk", game.ship_count)
        return ProbeResult.SUNK


def get_ship_info(game: Game, ship_id: int) -> str:
    """Descriptor ``row#column#orientation#size`` of one ship."""
    if not 0 <= ship_id < game.ship_count:
        raise ShipNotFound(ship_id, game.ship_count)
    return game.ships[ship_id].descriptor()


def get_solution(game: Game) -> list[str]:
    return [ship.descriptor() for ship in game.ships]
