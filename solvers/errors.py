class SudokuError(ValueError):
    pass


class InvalidInputError(SudokuError):
    pass


class ContradictionError(SudokuError):
    """
    The puzzle has no solution: a cell ran out of candidates, or two solved
    cells share a value inside one row/column/block.
    """

    def __init__(self, row, col, reason):
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(f"contradiction at r{row}c{col}: {reason}")
