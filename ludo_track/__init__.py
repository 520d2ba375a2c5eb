from .board import Board
from .config import BoardParameters, Config, config
from .game import enter_piece, move_piece
from .piece import Piece
from .player import Player
from .types import GameState, StateError, initial_state

__all__ = [
    "config",
    "Config",
    "BoardParameters",
    "Board",
    "Piece",
    "Player",
    "GameState",
    "StateError",
    "initial_state",
    "enter_piece",
    "move_piece",
]
