import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True, slots=True)
class BoardParameters:
    """Geometry of the circular track shared by every player."""

    distance_between_players: int
    number_of_players: int

    def __post_init__(self) -> None:
        if self.distance_between_players < 1:
            raise ValueError("distance_between_players must be positive")
        if self.number_of_players < 1:
            raise ValueError("number_of_players must be positive")

    @property
    def board_size(self) -> int:
        return self.distance_between_players * self.number_of_players

    def entry_position(self, player: int) -> int:
        """Square where ``player`` puts new pieces on the board."""
        if not 0 <= player < self.number_of_players:
            raise IndexError(f"Player index {player} out of range")
        return player * self.distance_between_players

    def normalize(self, pos: int) -> int:
        return pos % self.board_size


@dataclass(slots=True)
class Config:
    # --- Constants ---
    DISTANCE_BETWEEN_PLAYERS: int = int(os.getenv("DISTANCE_BETWEEN_PLAYERS", 16))
    NUM_PLAYERS: int = int(os.getenv("NUM_PLAYERS", 4))
    PIECES_PER_PLAYER: int = int(os.getenv("PIECES_PER_PLAYER", 4))

    def __post_init__(self):
        if self.NUM_PLAYERS < 2 or self.NUM_PLAYERS > 4:
            raise ValueError("NUM_PLAYERS must be between 2 and 4")
        if self.DISTANCE_BETWEEN_PLAYERS < 1:
            raise ValueError("DISTANCE_BETWEEN_PLAYERS must be positive")
        if self.PIECES_PER_PLAYER < 0:
            raise ValueError("PIECES_PER_PLAYER can't be negative")

    def board_parameters(self) -> BoardParameters:
        return BoardParameters(
            distance_between_players=self.DISTANCE_BETWEEN_PLAYERS,
            number_of_players=self.NUM_PLAYERS,
        )


config = Config()
