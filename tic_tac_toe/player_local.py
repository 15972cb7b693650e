import logging
from typing import TYPE_CHECKING

from tic_tac_toe.board import BOARD_SIZE, Coord, Mark
from tic_tac_toe.exception import InvalidCoordinateError
from tic_tac_toe.player import Player
from tic_tac_toe.ui import Ui

if TYPE_CHECKING:
    from tic_tac_toe.game import Game

logger = logging.getLogger(__name__)

INVALID_COORDINATE_MSG = "Invalid coordinate!"


def parse_coord(text: str) -> Coord:
    """Parse `row,col` input, each part an integer between 0 and BOARD_SIZE - 1."""
    parts = text.split(",")
    if len(parts) != 2:  # noqa: PLR2004
        msg = f"Expected 'row,col', got {text!r}"
        raise InvalidCoordinateError(msg)

    try:
        row, col = (int(part.strip()) for part in parts)
    except ValueError as e:
        msg = f"Not an integer pair: {text!r}"
        raise InvalidCoordinateError(msg) from e

    if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
        msg = f"Not between 0 and {BOARD_SIZE - 1}: {text!r}"
        raise InvalidCoordinateError(msg)
    return row, col


class HumanPlayer(Player):
    def __init__(self, name: str, ui: Ui) -> None:
        super().__init__(name)
        self._ui = ui

    def move(self, game: "Game", mark: Mark) -> Coord:  # noqa: ARG002
        game.show()
        while True:
            text = self._ui.get_input(f"{self._name}: please select your space")
            try:
                return parse_coord(text)
            except InvalidCoordinateError as e:
                logger.debug("Rejected input from %s: %s", self._name, e)
                self._ui.show_error(INVALID_COORDINATE_MSG)
