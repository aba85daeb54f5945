import numpy as np
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from solvers.candidates import ALL_MASK, value_to_mask, mask_to_values, mask_size, mask_value
from solvers.errors import InvalidInputError
from utils.board_utils import board_from_string

SIDE = 9
BLOCK = 3


class Grid:
    """
    9x9 후보 집합(bitmask) + row/column/block 유니온 캐시.

    cells[y, x]   : 셀 (y, x) 의 후보 마스크 (size 1 이면 풀린 셀)
    folded[y, x]  : 이미 유니온 캐시에 반영된 셀인지
    rows[y], columns[x], blocks[y // 3, x // 3] : 해당 유닛에 확정된 값들의 마스크
    """

    def __init__(self):
        self.cells = np.full((SIDE, SIDE), ALL_MASK, dtype=np.uint16)
        self.folded = np.zeros((SIDE, SIDE), dtype=bool)
        self.rows = np.zeros(SIDE, dtype=np.uint16)
        self.columns = np.zeros(SIDE, dtype=np.uint16)
        self.blocks = np.zeros((BLOCK, BLOCK), dtype=np.uint16)
        self.clashes = []  # [(y, x), ...] 같은 유닛에 같은 값이 두 번 확정된 셀
        self.passes = 0

    @classmethod
    def from_matrix(cls, matrix):
        """
        Build a grid from a 9x9 matrix of digits (0 = blank, 1-9 = given).
        Givens are folded into the union caches right away.
        """
        try:
            board = np.asarray(matrix)
        except ValueError as e:
            raise InvalidInputError(f"input is not a 9x9 matrix: {e}") from e

        if board.shape != (SIDE, SIDE):
            raise InvalidInputError(f"expected a 9x9 matrix, got shape {board.shape}")
        if board.dtype.kind not in "iu":
            raise InvalidInputError(f"expected integer digits, got dtype {board.dtype}")
        if np.any((board < 0) | (board > 9)):
            bad = [(int(y), int(x)) for y, x in np.argwhere((board < 0) | (board > 9))]
            raise InvalidInputError(f"digits must be in 0-9, offending cells: {bad}")

        grid = cls()
        for y, x in np.argwhere(board != 0):
            grid.cells[y, x] = value_to_mask(int(board[y, x]))
        grid.refresh()
        return grid

    @classmethod
    def from_string(cls, puzzle_str):
        return cls.from_matrix(board_from_string(puzzle_str))

    def copy(self):
        other = type(self)()
        other.cells = self.cells.copy()
        other.folded = self.folded.copy()
        other.rows = self.rows.copy()
        other.columns = self.columns.copy()
        other.blocks = self.blocks.copy()
        other.clashes = list(self.clashes)
        other.passes = self.passes
        return other

    # ------------------------------------------------------------------
    # Unit unions
    # ------------------------------------------------------------------
    def row_union(self, y):
        return int(self.rows[y])

    def column_union(self, x):
        return int(self.columns[x])

    def block_union(self, x, y):
        return int(self.blocks[y // BLOCK, x // BLOCK])

    def fold(self, y, x):
        """풀린 셀 (y, x) 의 값을 세 유니온에 반영. 이미 있는 값이면 clash 로 기록."""
        bit = int(self.cells[y, x])
        by, bx = y // BLOCK, x // BLOCK
        if (self.row_union(y) | self.column_union(x) | int(self.blocks[by, bx])) & bit:
            self.clashes.append((y, x))

        self.rows[y] |= bit
        self.columns[x] |= bit
        self.blocks[by, bx] |= bit
        self.folded[y, x] = True

    def refresh(self):
        """Fold every solved cell that has not contributed yet. Returns how many were folded."""
        count = 0
        for y in range(SIDE):
            for x in range(SIDE):
                if not self.folded[y, x] and mask_size(self.cells[y, x]) == 1:
                    self.fold(y, x)
                    count += 1
        return count

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def is_complete(self):
        return all(mask_size(m) == 1 for m in self.cells.flat)

    def find_contradiction(self):
        """Return (y, x, reason) for the first contradiction found, or None."""
        if self.clashes:
            y, x = self.clashes[0]
            return y, x, f"value {self.value(y, x)} already placed in its row, column or block"

        empty = np.argwhere(self.cells == 0)
        if len(empty) > 0:
            y, x = empty[0]
            return int(y), int(x), "no candidates left"
        return None

    def value(self, y, x):
        return mask_value(self.cells[y, x])

    def candidates(self, y, x):
        return mask_to_values(int(self.cells[y, x]))

    def to_board(self):
        board = np.zeros((SIDE, SIDE), dtype=int)
        for y in range(SIDE):
            for x in range(SIDE):
                board[y, x] = self.value(y, x)
        return board

    def __str__(self):
        return "\n".join(" ".join(str(v) for v in row) for row in self.to_board())


def initialize(matrix):
    return Grid.from_matrix(matrix)
