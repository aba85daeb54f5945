import numpy as np
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from solvers.errors import InvalidInputError


def board_from_string(board_str):
    """
    Convert a string of 81 digits (e.g., "53007...") to a 9x9 numpy board.
    0 or '.' represents an empty cell.
    """
    board_str = board_str.strip()
    if len(board_str) != 81:
        raise InvalidInputError(f"expected 81 characters, got {len(board_str)}")

    data = []
    for ch in board_str:
        if ch == '.':
            data.append(0)
        elif ch in '0123456789':
            data.append(int(ch))
        else:
            raise InvalidInputError(f"invalid character {ch!r} in puzzle string")

    return np.array(data, dtype=int).reshape(9, 9)


def board_to_string(board):
    return "".join(str(int(v)) for v in np.asarray(board).flatten())


def check_solution(board):
    """모든 row / col / box 가 1~9 를 정확히 한 번씩 포함하는지"""
    board = np.asarray(board)
    full = set(range(1, 10))
    for i in range(9):
        if set(board[i, :].tolist()) != full: return False
        if set(board[:, i].tolist()) != full: return False
    for br in range(3):
        for bc in range(3):
            box = board[br*3:(br+1)*3, bc*3:(bc+1)*3].flatten()
            if set(box.tolist()) != full: return False
    return True
