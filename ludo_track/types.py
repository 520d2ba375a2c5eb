from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .config import BoardParameters, config
from .piece import Piece
from .player import Player


class StateError(str, Enum):
    BLOCKING_PIECE = "Can't remove a blocking piece from the board"
    NO_PIECE = "There is no piece at this position"
    EMPTY_STOCK = "No piece left in stock"


@dataclass(frozen=True, slots=True)
class GameState:
    """Whole game value threaded through every transition.

    ``pieces`` keeps insertion order: freshly entered pieces are appended
    and a captured entry square is replaced in place, so callers may track
    a piece by its index during a scenario.
    """

    pieces: Tuple[Piece, ...]
    players: Tuple[Player, ...]
    parameters: BoardParameters
    error: Optional[str] = None

    def with_error(self, error: StateError) -> GameState:
        return replace(self, error=error)

    def updated(self, pieces: Tuple[Piece, ...], players: Tuple[Player, ...]) -> GameState:
        return replace(self, pieces=tuple(pieces), players=tuple(players), error=None)


def initial_state(
    parameters: BoardParameters | None = None,
    pieces_per_player: int | None = None,
) -> GameState:
    """
    Build the state of a game where every piece is still in stock.

    :param parameters: Board geometry, defaults to the environment config.
    :type parameters: BoardParameters | None, optional
    :param pieces_per_player: Stock given to each player, defaults to the environment config.
    :type pieces_per_player: int | None, optional
    :return: A fresh game state with an empty board and no error.
    :rtype: GameState
    """
    if parameters is None:
        parameters = config.board_parameters()
    if pieces_per_player is None:
        pieces_per_player = config.PIECES_PER_PLAYER
    players = tuple(
        Player(pieces_in_stock=pieces_per_player)
        for _ in range(parameters.number_of_players)
    )
    return GameState(pieces=(), players=players, parameters=parameters)
