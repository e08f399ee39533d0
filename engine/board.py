"""
Board model for tic-tac-toe.
Tracks the 3x3 grid of marks and enforces move legality.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .errors import IllegalMove


class Mark(Enum):
    """The two participant symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.value


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# All winning lines as cell indices (row-major, 0-based)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

# Characters accepted as an empty cell by Board.from_string
_EMPTY_CHARS = "_.- "


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to a 0-based (row, col) pair."""
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row: int, col: int) -> int:
    """Convert a 0-based (row, col) pair to a cell index."""
    return row * BOARD_SIZE + col


class Board:
    """
    A 3x3 tic-tac-toe board.

    Cells are stored row-major as ``None`` (empty) or a ``Mark``.
    The board is only ever mutated through ``apply``; hypothetical
    moves are explored with ``with_move``, which returns a new board.
    """

    def __init__(self, cells: Optional[Iterable[Optional[Mark]]] = None):
        """
        Create a board.

        Args:
            cells: Optional 9 cell values. Defaults to an empty board.
        """
        if cells is None:
            self._cells: List[Optional[Mark]] = [None] * CELL_COUNT
        else:
            self._cells = list(cells)
            if len(self._cells) != CELL_COUNT:
                raise ValueError(
                    f"A board needs exactly {CELL_COUNT} cells, got {len(self._cells)}"
                )
            for cell in self._cells:
                if cell is not None and not isinstance(cell, Mark):
                    raise ValueError(f"Invalid cell value: {cell!r}")

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from a compact text layout.

        ``X`` and ``O`` are marks; ``_``, ``.``, ``-`` and spaces are empty
        cells. ``/`` and newlines may separate rows.

        Example:
            Board.from_string("XX_/OO_/___")
        """
        cells: List[Optional[Mark]] = []
        for char in layout.replace("/", "").replace("\n", ""):
            upper = char.upper()
            if upper in ("X", "O"):
                cells.append(Mark(upper))
            elif char in _EMPTY_CHARS:
                cells.append(None)
            else:
                raise ValueError(f"Unexpected character in board layout: {char!r}")
        return cls(cells)

    # ==================== QUERIES ====================

    def __getitem__(self, index: int) -> Optional[Mark]:
        return self._cells[index]

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        layout = "".join(cell.symbol if cell else "_" for cell in self._cells)
        rows = [layout[i:i + BOARD_SIZE] for i in range(0, CELL_COUNT, BOARD_SIZE)]
        return f"Board({'/'.join(rows)!r})"

    def key(self) -> Tuple[Optional[Mark], ...]:
        """Immutable snapshot of the cells."""
        return tuple(self._cells)

    def is_empty_cell(self, index: int) -> bool:
        """
        Check whether a cell can be played.

        Out-of-range or non-integer indices simply return False.
        """
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return False
        return 0 <= index < CELL_COUNT and self._cells[index] is None

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for cell in self._cells)

    def has_won(self, mark: Mark) -> bool:
        """True if any of the 8 lines is made entirely of ``mark``."""
        cells = self._cells
        return any(
            cells[a] == mark and cells[b] == mark and cells[c] == mark
            for a, b, c in WINNING_LINES
        )

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def count(self, mark: Mark) -> int:
        """Number of cells holding ``mark``."""
        return sum(1 for cell in self._cells if cell == mark)

    def is_consistent(self) -> bool:
        """True if X has made the same number of moves as O, or one more."""
        return self.count(Mark.X) - self.count(Mark.O) in (0, 1)

    def grid(self) -> np.ndarray:
        """
        3x3 view of the board for display.

        Returns:
            Object array of cell symbols, with "" for empty cells.
        """
        symbols = [cell.symbol if cell else "" for cell in self._cells]
        return np.array(symbols, dtype=object).reshape(BOARD_SIZE, BOARD_SIZE)

    # ==================== MOVES ====================

    def apply(self, index: int, mark: Mark) -> None:
        """
        Place ``mark`` at ``index``.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Raises:
            IllegalMove: If the index is out of range or the cell is taken.
                The board is not modified.
        """
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise IllegalMove(index, "index must be an integer")
        if not 0 <= index < CELL_COUNT:
            raise IllegalMove(index, f"index must be between 0 and {CELL_COUNT - 1}")
        if self._cells[index] is not None:
            raise IllegalMove(index, f"cell is already occupied by {self._cells[index].symbol}")

        self._cells[int(index)] = mark

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board.__new__(Board)
        new_board._cells = self._cells.copy()
        return new_board

    def with_move(self, index: int, mark: Mark) -> "Board":
        """
        Return a new board with the move applied.

        The receiving board is left untouched.
        """
        new_board = self.copy()
        new_board.apply(index, mark)
        return new_board
