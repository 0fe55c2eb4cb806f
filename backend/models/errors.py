"""Typed failures raised by the board engine and the game registry."""


class GameError(Exception):
    """Base class for every game-level failure surfaced to callers."""


class InvalidDimensions(GameError):
    def __init__(
        self,
        rows: object,
        columns: object,
        ship_count: object,
        reason: str = "rows, columns and ship count must be positive integers",
    ) -> None:
        super().__init__(
            f"{reason} (got rows={rows!r}, columns={columns!r}, ships={ship_count!r})"
        )
        self.rows = rows
        self.columns = columns
        self.ship_count = ship_count


class UnplaceableFleet(GameError):
    def __init__(self, rows: int, columns: int, ship_count: int, attempts: int) -> None:
        super().__init__(
            f"could not place {ship_count} ships on a {rows}x{columns} board "
            f"after {attempts} attempts"
        )
        self.rows = rows
        self.columns = columns
        self.ship_count = ship_count
        self.attempts = attempts


class NotFound(GameError):
    """Lookup of a game or a ship that does not exist."""


class GameNotFound(NotFound):
    def __init__(self, game_id: int) -> None:
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class ShipNotFound(NotFound):
    def __init__(self, ship_id: int, ship_count: int) -> None:
        super().__init__(f"Ship {ship_id} not found (game has {ship_count} ships)")
        self.ship_id = ship_id
        self.ship_count = ship_count


class OutOfBounds(GameError):
    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        super().__init__(f"Cell ({row}, {column}) is outside the {rows}x{columns} board")
        self.row = row
        self.column = column
