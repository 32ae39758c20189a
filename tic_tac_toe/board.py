from typing import Final, Literal, TypeAlias

BOARD_SIZE: Final = 3
PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None
Line: TypeAlias = tuple[Cell, Cell, Cell]

EMPTY_SYMBOL: Final = " "


def cell_symbol(value: Cell) -> str:
    """Display symbol for a cell: "X", "O", or a single space when empty."""
    return value if value is not None else EMPTY_SYMBOL


class Board:
    """Fixed 3x3 grid of cells, row-major.

    Holds storage only. Move legality and outcome evaluation belong to Game.
    """

    def __init__(self) -> None:
        self._board: list[list[Cell]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @property
    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._board)

    def get(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._board[row][col]

    def set(self, row: int, col: int, value: Cell) -> None:
        self._check_bounds(row, col)
        self._board[row][col] = value

    def winnable_lines(self) -> list[Line]:
        """Return the 8 lines in fixed order: rows, columns, main diagonal, anti-diagonal."""
        b = self._board
        return [
            # Horizontal
            (b[0][0], b[0][1], b[0][2]),
            (b[1][0], b[1][1], b[1][2]),
            (b[2][0], b[2][1], b[2][2]),
            # Vertical
            (b[0][0], b[1][0], b[2][0]),
            (b[0][1], b[1][1], b[2][1]),
            (b[0][2], b[1][2], b[2][2]),
            # Diagonal
            (b[0][0], b[1][1], b[2][2]),
            (b[0][2], b[1][1], b[2][0]),
        ]

    def all_cells(self) -> list[Cell]:
        return [cell for row in self._board for cell in row]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.all_cells())

    def __str__(self) -> str:
        rows = [" │ ".join(cell_symbol(cell) for cell in row) for row in self.cells]
        lines = ["┌───┬───┬───┐"]
        for i, row in enumerate(rows):
            if i:
                lines.append("├───┼───┼───┤")
            lines.append(f"│ {row} │")
        lines.append("└───┴───┴───┘")
        return "\n".join(lines)

    @staticmethod
    def _check_bounds(row: int, col: int) -> None:
        # Negative indices would silently wrap around on the underlying lists.
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            msg = "Cell out of bounds."
            raise IndexError(msg)
