"""
Parent selection for the genetic search.
"""

import numpy as np


def tournament_select(
    population: np.ndarray,
    scores: np.ndarray,
    tournament_size: int,
    rng: np.random.Generator
) -> np.ndarray:
    """
    Pick a parent by tournament.

    Draws tournament_size candidates uniformly with replacement and returns
    the best one. On equal scores the earliest draw wins.

    Args:
        population: Candidates, shape (P, n)
        scores: Fitness of each candidate, shape (P,)
        tournament_size: Number of draws
        rng: Random number generator

    Returns:
        The winning candidate (a row of population, not a copy)
    """
    draws = rng.integers(0, len(population), size=tournament_size)

    best_idx = draws[0]
    for idx in draws[1:]:
        if scores[idx] > scores[best_idx]:
            best_idx = idx

    return population[best_idx]
