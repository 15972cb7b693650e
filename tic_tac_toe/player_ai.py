import logging
import random
from typing import TYPE_CHECKING

from tic_tac_toe.board import BOARD_SIZE, Board, Coord, Mark
from tic_tac_toe.exception import LogicError
from tic_tac_toe.player import Player

if TYPE_CHECKING:
    from tic_tac_toe.game import Game

logger = logging.getLogger(__name__)

DEFAULT_COMPUTER_NAME = "Tandy 400"


class ComputerPlayer(Player):
    """Takes an immediate win when one exists, otherwise plays a random empty cell."""

    def __init__(self, name: str = DEFAULT_COMPUTER_NAME, rng: random.Random | None = None) -> None:
        super().__init__(name)
        self._rng = rng if rng is not None else random.Random()

    def move(self, game: "Game", mark: Mark) -> Coord:
        coord = self.winning_move(game.board, mark)
        if coord is not None:
            logger.debug("%s found a winning move at %s", self._name, coord)
            return coord
        coord = self.random_move(game.board)
        logger.debug("%s picked random move %s", self._name, coord)
        return coord

    def winning_move(self, board: Board, mark: Mark) -> Coord | None:
        # Row-major scan, so the first winning cell is the one returned.
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                coord = (row, col)
                if not board.is_empty(coord):
                    continue
                simulated = board.clone()
                simulated.place(coord, mark)
                if simulated.winner() == mark:
                    return coord
        return None

    def random_move(self, board: Board) -> Coord:
        if not board.empty_cells():
            msg = f"No moves available for player {self._name}, but game not over."
            raise LogicError(msg)
        while True:
            coord = (self._rng.randrange(BOARD_SIZE), self._rng.randrange(BOARD_SIZE))
            if board.is_empty(coord):
                return coord
