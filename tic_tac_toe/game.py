import logging
from enum import Enum

from tic_tac_toe.board import Board, Mark
from tic_tac_toe.exception import LogicError
from tic_tac_toe.player import Player
from tic_tac_toe.ui import Ui
from tic_tac_toe.ui_terminal import TerminalUi

logger = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in-progress"
    FINISHED = "finished"


class Game:
    def __init__(self, player_x: Player, player_o: Player, ui: Ui | None = None) -> None:
        self._board = Board()
        self._players: dict[Mark, Player] = {"X": player_x, "O": player_o}
        self._turn: Mark = "X"
        self._ui = ui if ui is not None else TerminalUi()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> dict[Mark, Player]:
        return self._players

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def current_player(self) -> Player:
        return self._players[self._turn]

    @property
    def state(self) -> GameState:
        return GameState.FINISHED if self._board.is_over() else GameState.IN_PROGRESS

    @property
    def winner(self) -> Player | None:
        mark = self._board.winner()
        return self._players[mark] if mark is not None else None

    def show(self) -> None:
        self._ui.render_board(self._board)

    def run(self) -> Player | None:
        """Play turns until the board is over, then announce the result.

        Returns the winning player, or None on a draw.
        """
        logger.info("Game started: X=%r, O=%r", self._players["X"], self._players["O"])
        while self.state is GameState.IN_PROGRESS:
            self.play_turn()

        winner = self.winner
        if winner is not None:
            message = f"{winner.name} won the game!"
        else:
            message = "No one wins!"
        logger.info("Game finished: %s", message)
        self._ui.show_end_message(message, self._board)
        return winner

    def play_turn(self) -> None:
        if self.state is GameState.FINISHED:
            raise LogicError("Game over.")

        player = self.current_player
        while True:
            coord = player.move(self, self._turn)
            if self._board.place(coord, self._turn):
                break
            logger.debug("%s tried occupied cell %s, asking again", player.name, coord)

        logger.debug("%s placed %s at %s", player.name, self._turn, coord)
        self._turn = "O" if self._turn == "X" else "X"
