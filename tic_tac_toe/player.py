from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tic_tac_toe.board import Coord, Mark
    from tic_tac_toe.game import Game


class Player(ABC):
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def move(self, game: "Game", mark: "Mark") -> "Coord":
        """Pick the cell to put `mark` on. The game checks occupancy."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r})"
