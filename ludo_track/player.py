from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Player:
    pieces_in_stock: int

    def has_stock(self) -> bool:
        return self.pieces_in_stock > 0

    def take_from_stock(self) -> "Player":
        return replace(self, pieces_in_stock=self.pieces_in_stock - 1)
