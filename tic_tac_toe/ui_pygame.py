from typing import Final

import pygame

from tic_tac_toe.board import BOARD_SIZE, Board, Coord, Mark
from tic_tac_toe.exception import GameAbortedError
from tic_tac_toe.ui import Ui


def cell_at(pos: tuple[int, int], cell_size: int) -> Coord | None:
    """Map a pixel position to the board cell under it, or None outside the grid."""
    x, y = pos
    if x < 0 or y < 0:
        return None
    row, col = y // cell_size, x // cell_size
    if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
        return None
    return row, col


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    STATUS_HEIGHT: Final = 40
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4
    FPS: Final = 30

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self) -> None:
        self._rows: list[list[Mark | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._status = ""
        self._end_message = ""
        self._started = False

    def _start(self) -> None:
        if self._started:
            return
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 48)
        self._status_font = pygame.font.SysFont(None, 24)
        self._clock = pygame.time.Clock()
        self._started = True

    def _stop(self) -> None:
        if self._started:
            pygame.quit()
            self._started = False

    def render_board(self, board: Board) -> None:
        self._rows = [list(row) for row in board.rows]

    def ask_name(self) -> str:
        # No text entry in the window; callers fall back to the default name.
        return ""

    def get_input(self, prompt: str) -> str:
        self._start()
        pygame.display.set_caption(f"{self.TITLE} - {prompt}")
        while True:
            for pos in self._left_clicks():
                coord = cell_at(pos, self.CELL_SIZE)
                if coord is not None:
                    self._status = ""
                    row, col = coord
                    return f"{row},{col}"
            self._render()
            self._clock.tick(self.FPS)

    def show_message(self, message: str) -> None:
        self._status = message

    def show_error(self, message: str) -> None:
        self._status = message

    def show_end_message(self, message: str, board: Board) -> None:
        self._start()
        self.render_board(board)
        self._status = ""
        self._end_message = message
        pygame.display.set_caption(self.TITLE)
        try:
            while not self._left_clicks():
                self._render()
                self._clock.tick(self.FPS)
        except GameAbortedError:
            return  # Closing the window ends the game too.
        self._stop()

    def _left_clicks(self) -> list[tuple[int, int]]:
        """Drain the event queue and return the left-click positions in it.

        A QUIT anywhere in the batch wins over the clicks.
        """
        clicks: list[tuple[int, int]] = []
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                    raise GameAbortedError("Window closed")
                case pygame.MOUSEBUTTONDOWN if event.button == pygame.BUTTON_LEFT:
                    clicks.append(event.pos)
        return clicks

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_status()
        self._draw_end_message()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                value = self._rows[row][col]
                if value is None:
                    continue
                text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
                rect = text.get_rect(
                    center=(col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2),
                )
                self._screen.blit(text, rect)

    def _draw_status(self) -> None:
        if not self._status:
            return
        text = self._status_font.render(self._status, True, self.TEXT_COLOR)  # noqa: FBT003
        rect = text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE + self.STATUS_HEIGHT // 2))
        self._screen.blit(text, rect)

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._status_font.render("Click anywhere to exit", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 - 20))
        click_rect = click_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)
