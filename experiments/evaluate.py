import sys
import os
import time
import numpy as np
import argparse
import matplotlib.pyplot as plt
from tqdm import tqdm

# 프로젝트 루트 경로 추가
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from data.builtin_puzzles import PUZZLES
from data.load_dataset import SudokuDataset
from solvers.errors import ContradictionError
from solvers.grid import Grid
from solvers.simple_propagation import solve, SolveState
from utils.board_utils import board_from_string

OUTCOMES = ['solved', 'stalled', 'contradiction']


# -------------------------------------------------------------------------
# 1. Visualization
# -------------------------------------------------------------------------
def save_outcome_graph(stats, save_path='benchmark_result.png'):
    counts = [stats[k] for k in OUTCOMES]

    fig, ax = plt.subplots(figsize=(8, 5))
    bars = ax.bar(OUTCOMES, counts, color=['tab:blue', 'tab:gray', 'tab:red'], alpha=0.7)
    ax.set_xlabel('Outcome')
    ax.set_ylabel('Puzzles')

    for bar in bars:
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width()/2., height,
                f'{int(height)}', ha='center', va='bottom')

    plt.title(f"Constraint Propagation: {stats['total']} puzzles, "
              f"avg {stats['avg_time'] * 1000:.3f} ms")
    fig.tight_layout()
    plt.savefig(save_path)
    plt.close(fig)
    print(f"🖼️  Saved graph to {save_path}")


# -------------------------------------------------------------------------
# 2. Evaluation Logic
# -------------------------------------------------------------------------
def evaluate_benchmark(samples, show_progress=True):
    """
    samples: [(quiz_board, solution_board or None), ...]
    returns: 결과 통계 dict
    """
    stats = {k: 0 for k in OUTCOMES}
    stats.update(correct=0, total=0, total_time=0.0, total_passes=0)

    for quiz, solution in tqdm(samples, desc="Running Benchmark", disable=not show_progress):
        grid = Grid.from_matrix(quiz)

        start = time.time()
        try:
            state = solve(grid)
            outcome = 'solved' if state is SolveState.SOLVED else 'stalled'
        except ContradictionError:
            outcome = 'contradiction'
        stats['total_time'] += time.time() - start

        stats[outcome] += 1
        stats['total'] += 1
        stats['total_passes'] += grid.passes

        if outcome == 'solved' and solution is not None and np.array_equal(grid.to_board(), solution):
            stats['correct'] += 1

    n = max(stats['total'], 1)
    stats['avg_time'] = stats['total_time'] / n
    stats['avg_passes'] = stats['total_passes'] / n
    return stats


def print_report(stats):
    n = max(stats['total'], 1)
    print("\n" + "="*55)
    print("📊 Final Benchmark Results")
    print("="*55)
    for k in OUTCOMES:
        print(f"{k:<15}: {stats[k]:>6} ({stats[k] / n * 100:.1f}%)")
    print(f"{'correct':<15}: {stats['correct']:>6}")
    print(f"Avg time: {stats['avg_time']:.5f} sec | Avg passes: {stats['avg_passes']:.2f}")
    print("="*55)


def load_samples(args):
    if args.builtin:
        return [(board_from_string(q), board_from_string(s)) for q, s in PUZZLES]

    dataset = SudokuDataset(csv_path=args.csv)
    rng = np.random.default_rng(args.seed)
    indices = rng.choice(len(dataset), size=min(len(dataset), args.samples), replace=False)
    print(f"🔍 Benchmarking on {len(indices)} samples from {args.csv}...")
    return [dataset[int(i)] for i in indices]


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', type=str, default='./data/raw/sudoku.csv')
    parser.add_argument('--samples', type=int, default=1000)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--builtin', action='store_true', help='benchmark the two bundled puzzles')
    parser.add_argument('--plot', type=str, default=None, help='save outcome bar chart to this path')
    args = parser.parse_args(argv)

    try:
        samples = load_samples(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        return 1

    stats = evaluate_benchmark(samples)
    print_report(stats)

    if args.plot:
        save_outcome_graph(stats, args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
