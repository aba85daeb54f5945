import enum
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from solvers.candidates import mask_size
from solvers.errors import ContradictionError
from solvers.grid import Grid, SIDE


class SolveState(enum.Enum):
    RUNNING = "running"
    SOLVED = "solved"
    STALLED = "stalled"


def prune_candidates(grid):
    """
    아직 안 풀린 셀(후보 2개 이상)에서 row/column/block 유니온을 빼냄.
    returns: 이번 pruning 으로 후보가 1개가 된 셀 수
    """
    newly_solved = 0
    for y in range(SIDE):
        for x in range(SIDE):
            cands = int(grid.cells[y, x])
            if mask_size(cands) < 2:
                continue

            used = grid.row_union(y) | grid.column_union(x) | grid.block_union(x, y)
            cands &= ~used
            grid.cells[y, x] = cands

            if mask_size(cands) == 1:
                newly_solved += 1
    return newly_solved


def propagation_step(grid):
    """
    One pass: fold all solved cells into the unions, then prune every unsolved cell.
    Cells solved while pruning are folded on the next pass, so the unit unions
    only cover them again after the next grid.refresh().
    """
    grid.refresh()
    return prune_candidates(grid)


def _raise_if_contradiction(grid):
    found = grid.find_contradiction()
    if found is not None:
        raise ContradictionError(*found)


def solve(grid):
    """
    Fixed-point loop (Naked Single 기법). 그리드를 in-place 로 갱신.
    returns: SolveState.SOLVED or SolveState.STALLED
    raises: ContradictionError (후보가 0개인 셀 / 같은 유닛의 중복 값)
    """
    state = SolveState.RUNNING

    while state is SolveState.RUNNING:
        newly_solved = propagation_step(grid)
        grid.passes += 1
        _raise_if_contradiction(grid)

        if grid.is_complete():
            # 마지막 pass 에서 풀린 셀들도 유니온에 반영 후 다시 검사
            grid.refresh()
            _raise_if_contradiction(grid)
            state = SolveState.SOLVED
        elif newly_solved == 0:
            # 더 이상 논리적으로 채울 수 없음 (찍어야 함)
            state = SolveState.STALLED

    return state


def propagate_constraints(board):
    """
    numpy 보드(0 = 빈칸)에 대해 solve 실행. 입력 보드는 변경하지 않음.
    returns: (updated_board, is_solved, is_contradiction)
    """
    grid = Grid.from_matrix(board)
    try:
        state = solve(grid)
    except ContradictionError:
        return grid.to_board(), True, True  # 모순 발생

    return grid.to_board(), state is SolveState.SOLVED, False
