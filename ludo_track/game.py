from __future__ import annotations

from loguru import logger

from .board import Board
from .piece import Piece
from .types import GameState, StateError


# --- Entering a piece ---
def enter_piece(player: int, state: GameState) -> GameState:
    """
    Put a new piece from ``player``'s stock on their entry square.

    A non-blocking piece already on the entry square is captured and the new
    piece takes its slot in ``state.pieces``; a blocking one refuses the entry.

    :param player: Index of the entering player.
    :type player: int
    :param state: Current game state, left untouched.
    :type state: GameState
    :return: The next state, or the input state with ``error`` set.
    :rtype: GameState
    """
    entry = state.parameters.entry_position(player)

    if not state.players[player].has_stock():
        logger.warning(f"Player {player} has no piece left in stock")
        return state.with_error(StateError.EMPTY_STOCK)

    board = Board(state)
    new_piece = Piece(pos=entry, player=player, is_blocking=True, is_at_destination=False)
    pieces = list(state.pieces)
    idx = board.occupant(entry)
    if idx is None:
        pieces.append(new_piece)
    elif pieces[idx].is_blocking:
        logger.warning(f"Player {player} can't enter: blocking piece at {entry}")
        return state.with_error(StateError.BLOCKING_PIECE)
    else:
        logger.debug(
            f"Player {player} entering at {entry} captures a piece of player {pieces[idx].player}"
        )
        pieces[idx] = new_piece

    players = list(state.players)
    players[player] = players[player].take_from_stock()
    logger.debug(f"Player {player} entered a piece at {entry}")
    return state.updated(pieces, players)


# --- Moving a piece ---
def move_piece(from_pos: int, steps: int, state: GameState) -> GameState:
    """
    Advance the piece at ``from_pos`` by ``steps`` squares around the ring.

    Any blocking piece between ``from_pos`` (exclusive) and the destination
    (inclusive) refuses the move. A non-blocking piece on the destination is
    captured; pieces merely passed over stay where they are.

    :param from_pos: Position of the piece to move.
    :type from_pos: int
    :param steps: Number of squares to walk forward.
    :type steps: int
    :param state: Current game state, left untouched.
    :type state: GameState
    :return: The next state, or the input state with ``error`` set.
    :rtype: GameState
    """
    board = Board(state)
    mover_idx = board.occupant(from_pos)
    if mover_idx is None:
        logger.warning(f"No piece to move at {from_pos}")
        return state.with_error(StateError.NO_PIECE)

    to_pos = state.parameters.normalize(from_pos + steps)

    blocker = board.blocking_on_path(from_pos, steps, exclude=mover_idx)
    if blocker is not None:
        logger.warning(
            f"Move {from_pos} -> {to_pos} refused: blocking piece at {state.pieces[blocker].pos}"
        )
        return state.with_error(StateError.BLOCKING_PIECE)

    mover = state.pieces[mover_idx]
    pieces = list(state.pieces)
    # Blocking status, once cleared, is never restored
    pieces[mover_idx] = mover.moved_to(to_pos) if steps else mover

    captured = board.occupant(to_pos)
    if captured is not None and captured != mover_idx:
        logger.debug(
            f"Piece of player {mover.player} captures piece of player {pieces[captured].player} at {to_pos}"
        )
        del pieces[captured]

    logger.debug(f"Moved piece of player {mover.player} from {from_pos} to {to_pos}")
    return state.updated(pieces, state.players)
