from enum import Enum
from typing import Final, Literal, TypeAlias

Mark: TypeAlias = Literal["X", "O"]
Coord: TypeAlias = tuple[int, int]

BOARD_SIZE: Final = 3
MARKS: Final[tuple[Mark, Mark]] = ("X", "O")


class PlaceResult(Enum):
    PLACED = "placed"
    OCCUPIED = "occupied"

    def __bool__(self) -> bool:
        return self is PlaceResult.PLACED


class Board:
    def __init__(self) -> None:
        self._rows: list[list[Mark | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @property
    def rows(self) -> tuple[tuple[Mark | None, ...], ...]:
        """Read-only snapshot of the grid. Use `place` to change it."""
        return tuple(tuple(row) for row in self._rows)

    def clone(self) -> "Board":
        copied = Board()
        copied._rows = [row[:] for row in self._rows]
        return copied

    def get(self, coord: Coord) -> Mark | None:
        row, col = coord
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            raise IndexError("Move out of bounds.")
        return self._rows[row][col]

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) is None

    def place(self, coord: Coord, mark: Mark) -> PlaceResult:
        """Put a mark on an empty cell. Occupied cells are left untouched."""
        if not self.is_empty(coord):
            return PlaceResult.OCCUPIED
        row, col = coord
        self._rows[row][col] = mark
        return PlaceResult.PLACED

    def empty_cells(self) -> list[Coord]:
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if self._rows[r][c] is None]

    def columns(self) -> list[list[Mark | None]]:
        return [list(col) for col in zip(*self._rows, strict=True)]

    def diagonals(self) -> list[list[Mark | None]]:
        down = [(0, 0), (1, 1), (2, 2)]
        up = [(0, 2), (1, 1), (2, 0)]
        return [[self._rows[r][c] for r, c in diag] for diag in (down, up)]

    def lines(self) -> list[list[Mark | None]]:
        return [*(list(row) for row in self._rows), *self.columns(), *self.diagonals()]

    def winner(self) -> Mark | None:
        for line in self.lines():
            for mark in MARKS:
                if all(cell == mark for cell in line):
                    return mark
        return None

    def is_won(self) -> bool:
        return self.winner() is not None

    def is_tied(self) -> bool:
        if self.is_won():
            return False
        return all(all(cell is not None for cell in row) for row in self._rows)

    def is_over(self) -> bool:
        return self.is_won() or self.is_tied()
