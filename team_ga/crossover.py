"""
Crossover operators for the genetic search.

Candidates are permutations (lead index -> junior index). Two operators are
available:

- single_point: positional splice of two parents. Children can repeat some
  juniors and miss others, so they may need repair.
- order: order crossover (OX1). Children are always valid permutations.
"""

from typing import Dict, Tuple
import numpy as np

CROSSOVER_STRATEGIES = ("order", "single_point")


def single_point_crossover(
    parent_a: np.ndarray,
    parent_b: np.ndarray,
    rng: np.random.Generator
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Splice two parents at one cut point.

    A cut point k is drawn uniformly from [0, n). Child A takes parent A's
    first k genes followed by parent B's genes from k on; child B is the
    mirror image.

    Args:
        parent_a: First parent
        parent_b: Second parent
        rng: Random number generator

    Returns:
        Tuple of (child_a, child_b), new arrays

    Note:
        Children are not guaranteed to be permutations.
    """
    n = len(parent_a)
    point = int(rng.integers(0, n))

    child_a = np.concatenate([parent_a[:point], parent_b[point:]])
    child_b = np.concatenate([parent_b[:point], parent_a[point:]])

    return child_a, child_b


def _order_child(donor: np.ndarray, filler: np.ndarray, start: int, end: int) -> np.ndarray:
    """Build one OX1 child: donor's slice [start, end] kept, the rest in filler's order."""
    n = len(donor)
    child = np.empty(n, dtype=donor.dtype)
    child[start:end + 1] = donor[start:end + 1]

    kept = set(donor[start:end + 1].tolist())
    fill_values = [g for g in np.roll(filler, -(end + 1)).tolist() if g not in kept]
    fill_positions = [(end + 1 + k) % n for k in range(n - (end - start + 1))]

    child[fill_positions] = fill_values
    return child


def order_crossover(
    parent_a: np.ndarray,
    parent_b: np.ndarray,
    rng: np.random.Generator
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Order crossover (OX1).

    Two cut points are drawn. Each child keeps the segment between them from
    one parent and fills the remaining positions, starting after the second
    cut and wrapping around, with the other parent's genes in the order they
    appear there (skipping genes already in the segment).

    Args:
        parent_a: First parent (valid permutation)
        parent_b: Second parent (valid permutation)
        rng: Random number generator

    Returns:
        Tuple of (child_a, child_b), both valid permutations
    """
    n = len(parent_a)
    start, end = sorted(int(x) for x in rng.integers(0, n, size=2))

    child_a = _order_child(parent_a, parent_b, start, end)
    child_b = _order_child(parent_b, parent_a, start, end)

    return child_a, child_b


def apply_crossover(
    parent_a: np.ndarray,
    parent_b: np.ndarray,
    config: Dict,
    rng: np.random.Generator
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Apply the crossover operator selected in the configuration.

    Args:
        parent_a: First parent
        parent_b: Second parent
        config: GA configuration (uses 'crossover_strategy')
        rng: Random number generator

    Returns:
        Tuple of (child_a, child_b)

    Raises:
        ValueError: If strategy is unknown
    """
    strategy = config.get('crossover_strategy', 'order')

    if strategy == 'order':
        return order_crossover(parent_a, parent_b, rng)

    elif strategy == 'single_point':
        return single_point_crossover(parent_a, parent_b, rng)

    else:
        raise ValueError(f"Unknown crossover strategy: {strategy}")
