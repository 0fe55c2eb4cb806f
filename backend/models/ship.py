from dataclasses import dataclass
from enum import StrEnum

DESCRIPTOR_SEPARATOR = "#"


class Orientation(StrEnum):
    HORIZONTAL = "H"
    VERTICAL = "V"


@dataclass
class Ship:
    row: int                   # bow row
    column: int                # bow column
    orientation: Orientation
    size: int
    hits_received: int = 0

    @property
    def sunk(self) -> bool:
        return self.hits_received == self.size

    def cells(self) -> list[tuple[int, int]]:
        """Cells covered by the ship, bow first."""
        if self.orientation is Orientation.HORIZONTAL:
            return [(self.row, self.column + i) for i in range(self.size)]
        return [(self.row + i, self.column) for i in range(self.size)]

    def descriptor(self) -> str:
        """``row#column#orientation#size``, independent of hit state."""
        return DESCRIPTOR_SEPARATOR.join(
            (str(self.row), str(self.column), self.orientation.value, str(self.size))
        )
