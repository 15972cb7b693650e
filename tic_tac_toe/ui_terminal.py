# ruff: noqa: T201

import sys
from typing import TextIO

from tic_tac_toe.board import Board
from tic_tac_toe.exception import GameAbortedError
from tic_tac_toe.ui import Ui


class TerminalUi(Ui):
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def render_board(self, board: Board) -> None:
        for row in board.rows:
            print(list(row), file=self._out, flush=True)

    def get_input(self, prompt: str) -> str:
        print(prompt, file=self._out, flush=True)
        try:
            if self._stdin is None:
                return input()
            line = self._stdin.readline()
        except (KeyboardInterrupt, EOFError) as e:
            raise GameAbortedError("Input closed") from e
        if not line:
            raise GameAbortedError("Input closed")
        return line.rstrip("\n")

    def ask_name(self) -> str:
        return self.get_input("Enter your name:").strip()

    def show_message(self, message: str) -> None:
        print(message, file=self._out, flush=True)

    def show_error(self, message: str) -> None:
        print(message, file=self._out, flush=True)

    def show_end_message(self, message: str, board: Board) -> None:  # noqa: ARG002
        print(message, file=self._out, flush=True)
