from abc import ABC, abstractmethod

from tic_tac_toe.board import Board


class Ui(ABC):
    """Front end shared by the game and its human players.

    The game renders the board and announces the result through it, and
    human players read their raw input and report input errors through it.
    """

    @abstractmethod
    def render_board(self, board: Board) -> None:
        pass

    @abstractmethod
    def get_input(self, prompt: str) -> str:
        """Block until the user answers the prompt.

        Raises GameAbortedError if the user gives up (closed input, closed window).
        """

    @abstractmethod
    def ask_name(self) -> str:
        """Ask the human player for a display name. May return an empty string."""

    @abstractmethod
    def show_message(self, message: str) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass

    @abstractmethod
    def show_end_message(self, message: str, board: Board) -> None:
        pass
