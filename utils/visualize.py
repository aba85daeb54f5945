import numpy as np

# ANSI Colors
RED = '\033[91m'    # 충돌 (에러)
BLUE = '\033[94m'   # 전파로 채운 값
GRAY = '\033[90m'   # 아직 못 푼 칸
RESET = '\033[0m'


def get_conflict_mask(board):
    """
    9x9 보드에서 규칙을 위반한 셀의 마스크(True=위반)를 반환
    """
    board = np.asarray(board)
    conflict_mask = np.zeros((9, 9), dtype=bool)

    for r in range(9):
        for c in range(9):
            val = board[r, c]
            if val == 0: continue

            br, bc = r // 3, c // 3
            box = board[br*3:(br+1)*3, bc*3:(bc+1)*3]
            if (np.sum(board[r, :] == val) > 1
                    or np.sum(board[:, c] == val) > 1
                    or np.sum(box == val) > 1):
                conflict_mask[r, c] = True

    return conflict_mask


def print_sudoku(board, original=None):
    """
    board: 풀이 결과 (0 = 아직 못 푼 칸)
    original: 초기 문제. 주어지면 새로 채운 칸을 파란색으로 표시
    """
    board = np.asarray(board)
    conflicts = get_conflict_mask(board)

    print("-" * 25)
    for i in range(9):
        if i > 0 and i % 3 == 0:
            print("-" * 25)
        row_str = ""
        for j in range(9):
            if j > 0 and j % 3 == 0:
                row_str += "| "

            val = board[i, j]
            if val == 0:
                row_str += f"{GRAY}.{RESET} "
            elif conflicts[i, j]:
                row_str += f"{RED}{val}{RESET} "
            elif original is not None and original[i, j] == 0:
                row_str += f"{BLUE}{val}{RESET} "
            else:
                row_str += f"{val} "

        print(row_str)
    print("-" * 25)

    if np.any(conflicts):
        print(f"{RED}⚠️  DETECTED ERRORS: Sudoku rules violated!{RESET}")
    elif np.all(board != 0):
        print(f"{BLUE}✅ Perfect Solution!{RESET}")
    else:
        print(f"{GRAY}🧩 {int(np.sum(board == 0))} cells left undetermined.{RESET}")


def print_candidates(grid):
    """안 풀린 칸의 남은 후보들을 r{y}c{x}: [..] 형태로 출력"""
    for y in range(9):
        for x in range(9):
            cands = grid.candidates(y, x)
            if len(cands) != 1:
                print(f"r{y}c{x}: {cands}")
