from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Piece:
    """Lightweight piece model. Holds state only.

    Captures and blocking checks are resolved by the transitions in
    ``ludo_track.game``; position lookups live in ``ludo_track.board``.
    """

    pos: int  # 0..board_size-1 on the ring
    player: int  # owner index
    is_blocking: bool = False  # still sitting on its own entry square
    is_at_destination: bool = False

    def moved_to(self, new_pos: int) -> "Piece":
        return replace(self, pos=new_pos, is_blocking=False)
