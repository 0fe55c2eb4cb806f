from models import CellState, Game, Orientation, ProbeResult, Ship


def test_ship_cells_follow_orientation() -> None:
    horizontal = Ship(row=2, column=1, orientation=Orientation.HORIZONTAL, size=3)
    vertical = Ship(row=0, column=4, orientation=Orientation.VERTICAL, size=2)
    assert horizontal.cells() == [(2, 1), (2, 2), (2, 3)]
    assert vertical.cells() == [(0, 4), (1, 4)]


def test_ship_descriptor_ignores_hits() -> None:
    ship = Ship(row=3, column=5, orientation=Orientation.VERTICAL, size=2)
    assert ship.descriptor() == "3#5#V#2"
    ship.hits_received = 2
    assert ship.sunk is True
    assert ship.descriptor() == "3#5#V#2"


def test_game_defaults_to_unknown_grid() -> None:
    game = Game(
        rows=2,
        columns=3,
        ship_count=1,
        ships=[Ship(row=0, column=0, orientation=Orientation.HORIZONTAL, size=1)],
    )
    assert game.grid == [[CellState.UNKNOWN] * 3 for _ in range(2)]
    assert game.in_bounds(1, 2)
    assert not game.in_bounds(2, 0)
    assert not game.in_bounds(0, -1)
    assert game.all_sunk is False


def test_probe_result_codes_are_distinct_integers() -> None:
    codes = [int(result) for result in ProbeResult]
    assert len(set(codes)) == len(codes)
    assert ProbeResult.MISS == -1
    assert ProbeResult.SUNK == -3
