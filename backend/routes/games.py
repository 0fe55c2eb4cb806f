"""Game REST API under /partidas. Paths and payloads match what existing clients expect."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import PlainTextResponse

from models import GameError, GameNotFound, InvalidDimensions, NotFound, OutOfBounds, UnplaceableFleet
from services.registry import GameRegistry, game_registry
from services.solution_xml import solution_to_xml

router = APIRouter(prefix="/partidas", tags=["games"])
logger = logging.getLogger(__name__)


def get_registry() -> GameRegistry:
    """Registry dependency; tests override it with an isolated GameRegistry."""
    return game_registry


def _to_http_error(exc: GameError) -> HTTPException:
    if isinstance(exc, NotFound):
        status_code = 404
    elif isinstance(exc, (InvalidDimensions, OutOfBounds)):
        status_code = 400
    elif isinstance(exc, UnplaceableFleet):
        status_code = 409
    else:
        status_code = 500
    logger.warning("[games] %s -> %d: %s", type(exc).__name__, status_code, exc)
    return HTTPException(status_code=status_code, detail=str(exc))


@router.post(
    "/{filas}/{columnas}/{barcos}",
    status_code=201,
    response_class=Response,
)
def create_game(
    filas: int,
    columnas: int,
    barcos: int,
    request: Request,
    registry: GameRegistry = Depends(get_registry),
) -> Response:
    """Create a game with random ships. Empty body; the new game's URI goes in the Location header."""
    logger.info("[games] POST /partidas/%s/%s/%s called", filas, columnas, barcos)
    try:
        game_id, _ = registry.create_game(filas, columnas, barcos)
    except GameError as exc:
        raise _to_http_error(exc) from exc
    location = str(request.url_for("get_solution", game_id=game_id))
    return Response(status_code=201, headers={"Location": location})


@router.delete("/{game_id}", status_code=200)
def delete_game(game_id: int, registry: GameRegistry = Depends(get_registry)) -> Response:
    logger.info("[games] DELETE /partidas/%s called", game_id)
    if not registry.delete_game(game_id):
        raise _to_http_error(GameNotFound(game_id))
    return Response(status_code=200)


@router.put("/{game_id}", response_class=PlainTextResponse)
def probe_cell(
    game_id: int,
    fila: int = Query(..., description="Row of the probed cell"),
    columna: int = Query(..., description="Column of the probed cell"),
    registry: GameRegistry = Depends(get_registry),
) -> PlainTextResponse:
    """
    Probe one cell. Body is the integer result code:
    -1 miss, -2 hit, -3 sunk, -4 already probed.
    """
    try:
        result = registry.probe(game_id, fila, columna)
    except GameError as exc:
        raise _to_http_error(exc) from exc
    logger.info("[games] PUT /partidas/%s fila=%s columna=%s -> %s", game_id, fila, columna, result.name)
    return PlainTextResponse(str(int(result)))


@router.get("/{game_id}/{ship_id}", response_class=PlainTextResponse)
def get_ship(
    game_id: int,
    ship_id: int,
    registry: GameRegistry = Depends(get_registry),
) -> PlainTextResponse:
    """Ship data as ``row#column#orientation#size``."""
    try:
        descriptor = registry.ship_info(game_id, ship_id)
    except GameError as exc:
        raise _to_http_error(exc) from exc
    return PlainTextResponse(descriptor)


@router.get("/{game_id}")
def get_solution(game_id: int, registry: GameRegistry = Depends(get_registry)) -> Response:
    """Every ship of the game, encoded as <solucion tam="N"><barco>...</barco>...</solucion>."""
    try:
        descriptors = registry.solution(game_id)
    except GameError as exc:
        raise _to_http_error(exc) from exc
    return Response(content=solution_to_xml(descriptors), media_type="application/xml")
