"""In-memory registry of active games, keyed by a monotonically increasing integer id."""

from __future__ import annotations

import logging
import random
from threading import Lock

from app.config import EngineSettings
from models import Game, GameNotFound, ProbeResult
from services import board_engine

logger = logging.getLogger(__name__)


class GameRegistry:
    """
    Thread-safe collection of games.

    - Ids start at 1 and are never reused, even after deletion.
    - Id allocation and insertion happen under one lock, so a freshly issued
      id is always retrievable.
    - Probes capture the game reference under the registry lock and then run
      under the game's own lock. A probe that captured the game before a
      concurrent delete completes against that game; one that looks up after
      the delete gets GameNotFound.
    """

    def __init__(
        self,
        *,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = Lock()
        self._games: dict[int, Game] = {}
        self._last_id = 0
        self._settings = settings
        self._rng = rng

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games

    def create_game(self, rows: int, columns: int, ship_count: int) -> tuple[int, Game]:
        # Placement runs outside the lock; a failure here stores nothing and uses no id.
        game = board_engine.create_game(
            rows, columns, ship_count, settings=self._settings, rng=self._rng
        )
        with self._lock:
            self._last_id += 1
            game_id = self._last_id
            self._games[game_id] = game
        logger.info(
            "[registry] Game created: id=%d board=%dx%d ships=%d",
            game_id,
            rows,
            columns,
            ship_count,
        )
        return game_id, game

    def delete_game(self, game_id: int) -> bool:
        with self._lock:
            removed = self._games.pop(game_id, None)
        if removed is None:
            logger.warning("[registry] Delete of unknown game id=%s", game_id)
            return False
        logger.info("[registry] Game deleted: id=%d", game_id)
        return True

    def get_game(self, game_id: int) -> Game:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    def probe(self, game_id: int, row: int, column: int) -> ProbeResult:
        return board_engine.probe_cell(self.get_game(game_id), row, column)

    def ship_info(self, game_id: int, ship_id: int) -> str:
        return board_engine.get_ship_info(self.get_game(game_id), ship_id)

    def solution(self, game_id: int) -> list[str]:
        return board_engine.get_solution(self.get_game(game_id))

    def clear(self) -> None:
        """Drop every game. Ids keep increasing afterwards."""
        with self._lock:
            self._games.clear()


# Default registry used by the HTTP routes.
game_registry = GameRegistry()
