import argparse
import sys
import time

from data.builtin_puzzles import PUZZLES
from solvers.errors import SudokuError
from solvers.grid import Grid
from solvers.simple_propagation import solve, SolveState
from utils.visualize import print_sudoku, print_candidates


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--input', type=str, default=PUZZLES[0][0],
                        help='Sudoku string (81 chars, 0 or . for blank)')
    parser.add_argument('--candidates', action='store_true',
                        help='print remaining candidates of unsolved cells')
    args = parser.parse_args(argv)

    print(f"🧩 Puzzle: {args.input[:15]}...")

    try:
        grid = Grid.from_string(args.input)
        original = grid.to_board()

        start_time = time.time()
        state = solve(grid)
        elapsed = time.time() - start_time
    except SudokuError as e:
        print(f"❌ {e}")
        return 1

    if state is SolveState.SOLVED:
        print(f"\n🎉 Solved in {elapsed:.4f} sec ({grid.passes} passes)!")
    else:
        print(f"\n💀 Stalled after {grid.passes} passes ({elapsed:.4f} sec). Needs guessing.")

    print_sudoku(grid.to_board(), original=original)
    if args.candidates and state is SolveState.STALLED:
        print_candidates(grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
