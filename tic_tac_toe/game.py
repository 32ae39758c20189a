import logging
from dataclasses import dataclass
from typing import TypeAlias

from tic_tac_toe.board import Board, PlayerSymbol
from tic_tac_toe.exception import InvalidMoveError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Continue:
    pass


@dataclass(frozen=True, slots=True)
class PlayerWins:
    player: PlayerSymbol


@dataclass(frozen=True, slots=True)
class Draw:
    pass


GameStatus: TypeAlias = Continue | PlayerWins | Draw


def other_player(symbol: PlayerSymbol) -> PlayerSymbol:
    return "O" if symbol == "X" else "X"


class Game:
    def __init__(self) -> None:
        self._board = Board()
        self._current_player: PlayerSymbol = "X"

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> PlayerSymbol:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._evaluate()

    def play(self, row: int, col: int) -> GameStatus:
        """Place the current player's mark at (row, col) and return the resulting status.

        Raises InvalidMoveError if the cell is already occupied; the game is left untouched.
        Raises IndexError if the coordinates are outside the board.
        """
        if self._board.get(row, col) is not None:
            logger.info("Rejected move by %s at (%d, %d): cell occupied", self._current_player, row, col)
            msg = "Cell occupied."
            raise InvalidMoveError(msg)

        self._board.set(row, col, self._current_player)
        logger.debug("%s played (%d, %d)", self._current_player, row, col)

        status = self._evaluate()
        if isinstance(status, Continue):
            self._current_player = other_player(self._current_player)
        else:
            logger.debug("Game over: %s", status)
        return status

    def _evaluate(self) -> GameStatus:
        # Wins take precedence over a full board.
        for first, second, third in self._board.winnable_lines():
            if first is not None and first == second == third:
                return PlayerWins(first)

        if self._board.is_full():
            return Draw()

        return Continue()
