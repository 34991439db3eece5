"""
Mutation and random candidate generation.
"""

import numpy as np


def random_permutation(n: int, rng: np.random.Generator) -> np.ndarray:
    """
    Uniformly random permutation of 0..n-1.

    Fisher-Yates shuffle from the last position down, so every permutation
    is equally likely.
    """
    perm = np.arange(n, dtype=np.int64)
    for i in range(n - 1, 0, -1):
        k = int(rng.integers(0, i + 1))
        perm[i], perm[k] = perm[k], perm[i]
    return perm


def swap_mutation(candidate: np.ndarray, mutation_rate: float, rng: np.random.Generator) -> bool:
    """
    Swap two random positions in place with probability mutation_rate.

    Both positions are drawn independently, so they may coincide.

    Args:
        candidate: Candidate to mutate (modified in place)
        mutation_rate: Probability of applying the swap
        rng: Random number generator

    Returns:
        True if a swap was applied
    """
    if rng.random() >= mutation_rate:
        return False

    n = len(candidate)
    i = int(rng.integers(0, n))
    j = int(rng.integers(0, n))
    candidate[i], candidate[j] = candidate[j], candidate[i]
    return True
