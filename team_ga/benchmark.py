"""
Benchmark for the team building strategy.

Runs the search repeatedly on freshly generated random problems and reports
the harmonic mean of team satisfactions with the strict (report-time)
policy.
"""

from typing import Dict, Any, Optional
import time
import numpy as np

from .engine import TeamBuilder
from .fitness import STRICT, evaluate_teams
from .io_utils import generate_random_problem
from .preferences import build_preference_map


def run_benchmark(
    size: int,
    runs: int,
    config: Optional[Dict[str, Any]] = None,
    rng: Optional[np.random.Generator] = None,
    progress_every: int = 0
) -> Dict[str, Any]:
    """
    Average harmonic mean over repeated random problems.

    Args:
        size: Number of team leads (and juniors) per problem
        runs: Number of problems to solve
        config: GA configuration overrides
        rng: Random number generator shared by data generation and search
        progress_every: Print progress every N runs (0 = silent)

    Returns:
        Dictionary with 'scores', 'mean', 'std', 'min', 'max',
        'histories' and 'elapsed_seconds'
    """
    if rng is None:
        rng = np.random.default_rng((config or {}).get('random_seed'))

    builder = TeamBuilder(config, rng=rng)
    scores = []
    histories = []
    start_time = time.time()

    for i in range(runs):
        leads, juniors, lead_wishlists, junior_wishlists = generate_random_problem(size, rng)
        result = builder.search(leads, juniors, lead_wishlists, junior_wishlists)

        score = evaluate_teams(
            result.teams,
            build_preference_map(lead_wishlists),
            build_preference_map(junior_wishlists),
            policy=STRICT
        )
        scores.append(score)
        histories.append(result.history)

        if progress_every and i % progress_every == 0:
            print(f"[{i}] Current Harmonic Mean: {score:.4f}. "
                  f"Total Harmonic Mean: {np.mean(scores):.4f}")

    scores_array = np.array(scores) if scores else np.zeros(1)

    return {
        'size': size,
        'runs': runs,
        'scores': scores,
        'mean': float(scores_array.mean()),
        'std': float(scores_array.std()),
        'min': float(scores_array.min()),
        'max': float(scores_array.max()),
        'histories': histories,
        'elapsed_seconds': round(time.time() - start_time, 4),
    }


def print_benchmark_report(report: Dict[str, Any]) -> None:
    """Print a benchmark summary."""
    print("=" * 70)
    print("BENCHMARK")
    print("=" * 70)
    print(f"Team size (n): {report['size']}")
    print(f"Runs: {report['runs']}")
    print(f"Average Harmonic Mean of team satisfactions: {report['mean']:.4f}")
    print(f"Std: {report['std']:.4f}  Min: {report['min']:.4f}  Max: {report['max']:.4f}")
    print(f"Elapsed: {report['elapsed_seconds']:.2f} s")
