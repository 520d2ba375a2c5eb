from __future__ import annotations

from typing import Dict, List

import numpy as np

from .piece import Piece
from .types import GameState


class Board:
    """Position index over a game state (no rule logic)."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.parameters = state.parameters
        # Every landing is resolved by a capture or refused, so one piece per square
        self._by_pos: Dict[int, int] = {
            pc.pos: idx for idx, pc in enumerate(state.pieces)
        }

    def occupant(self, pos: int) -> int | None:
        """Index in ``state.pieces`` of the piece at ``pos``, if any."""
        return self._by_pos.get(self.parameters.normalize(pos))

    def piece_at(self, pos: int) -> Piece | None:
        idx = self.occupant(pos)
        return None if idx is None else self.state.pieces[idx]

    def path(self, from_pos: int, steps: int) -> List[int]:
        """Squares walked forward from ``from_pos`` (exclusive) to the
        destination (inclusive), wrapping around the ring."""
        return [self.parameters.normalize(from_pos + k) for k in range(1, steps + 1)]

    def blocking_on_path(self, from_pos: int, steps: int, exclude: int) -> int | None:
        # One full loop already visits every square
        for pos in self.path(from_pos, min(steps, self.parameters.board_size)):
            idx = self._by_pos.get(pos)
            if idx is not None and idx != exclude and self.state.pieces[idx].is_blocking:
                return idx
        return None

    def build_tensor(self, out: np.ndarray | None = None) -> np.ndarray:
        """Build a (number_of_players + 1, board_size) occupancy tensor.

        Channels:
        0..n-1: pieces of player n
        n: blocking pieces
        """
        n = self.parameters.number_of_players
        shape = (n + 1, self.parameters.board_size)
        if out is not None:
            board = out
            if board.shape != shape:
                raise ValueError(f"Expected board tensor of shape {shape}")
        else:
            board = np.zeros(shape, dtype=np.float32)

        board.fill(0.0)
        for pc in self.state.pieces:
            board[pc.player, pc.pos] = 1.0
            if pc.is_blocking:
                board[n, pc.pos] = 1.0
        return board
