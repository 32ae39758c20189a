# ruff: noqa: T201

import re
import sys
from collections.abc import Callable
from typing import Final, TextIO

from tic_tac_toe.board import BOARD_SIZE
from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.game import Continue, Draw, Game, GameStatus, PlayerWins


class InputError(ValueError):
    pass


class TerminalUi:
    """Text front-end that drives a Game with 1-based "row column" input."""

    EXIT_COMMAND: Final = "exit"

    def __init__(
        self,
        game: Game | None = None,
        input_fn: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._game = game if game is not None else Game()
        self._input_fn = input_fn
        self._output = output if output is not None else sys.stdout
        self._running = False

    @property
    def game(self) -> Game:
        return self._game

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True
        self._render_board()
        # A game handed over after it already ended only gets its result shown.
        self._on_status(self._game.status)
        while self._running:
            self._ask_for_move()
            self._get_input()

    def _stop(self) -> None:
        self._running = False

    def _get_input(self) -> None:
        try:
            input_str = self._input_fn()
        except (KeyboardInterrupt, EOFError):
            self._print()
            self._stop()
            return

        if input_str.strip() == self.EXIT_COMMAND:
            self._stop()
            return

        try:
            row, col = parse_move(input_str)
        except InputError as e:
            self._on_input_error(e)
            return

        try:
            status = self._game.play(row, col)
        except InvalidMoveError as e:
            self._on_input_error(e)
            return

        self._render_board()
        self._on_status(status)

    def _on_status(self, status: GameStatus) -> None:
        match status:
            case PlayerWins(player):
                self._show_end_message(f"Winner: {player}")
            case Draw():
                self._show_end_message("It's a draw")
            case Continue():
                pass

    # -----------------------------
    # Rendering
    # -----------------------------

    def _render_board(self) -> None:
        self._print(f"\n{self._game.board}\n")

    def _ask_for_move(self) -> None:
        self._print(
            f"Player {self._game.current_player}, enter row and column (1-{BOARD_SIZE}): ",
            end="",
        )

    def _show_end_message(self, msg: str) -> None:
        self._print(msg)
        self._stop()

    def _on_input_error(self, exception: Exception) -> None:
        self._print(str(exception))

    def _print(self, *args: object, end: str = "\n") -> None:
        print(*args, end=end, file=self._output, flush=True)


def parse_move(input_str: str) -> tuple[int, int]:
    """Parse 1-based "row column" (or "row,column") input into 0-based coordinates."""
    parts = [part for part in re.split(r"[\s,]+", input_str.strip()) if part]
    if len(parts) != 2:  # noqa: PLR2004
        msg = "Enter a row and a column"
        raise InputError(msg)

    try:
        row, col = (int(part) for part in parts)
    except ValueError as e:
        msg = "Not an integer"
        raise InputError(msg) from e

    if not (1 <= row <= BOARD_SIZE) or not (1 <= col <= BOARD_SIZE):
        msg = f"Not between 1 and {BOARD_SIZE}"
        raise InputError(msg)

    return row - 1, col - 1
