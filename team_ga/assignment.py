"""
Optimal assignment seed.

Builds the cost matrix from both groups' wishlists and delegates to scipy's
exact assignment solver (Hungarian-type algorithm). The resulting
permutation seeds the genetic search.
"""

from typing import Dict, Sequence
import numpy as np
from scipy.optimize import linear_sum_assignment

from .data_models import Participant, Wishlist
from .preferences import satisfaction_matrix


class SizeMismatchError(ValueError):
    """Raised when the two groups have different sizes."""
    pass


class AssignmentError(Exception):
    """Raised when the assignment solver rejects the cost matrix."""
    pass


def validate_group_sizes(leads: Sequence[Participant], juniors: Sequence[Participant]) -> None:
    """
    Check that every lead can get exactly one junior.

    Raises:
        SizeMismatchError: If the groups differ in size
    """
    if len(leads) != len(juniors):
        raise SizeMismatchError(
            f"Team leads and juniors must have the same size, "
            f"got {len(leads)} leads and {len(juniors)} juniors"
        )


def build_cost_matrix(
    leads: Sequence[Participant],
    juniors: Sequence[Participant],
    lead_prefs: Dict[int, Wishlist],
    junior_prefs: Dict[int, Wishlist]
) -> np.ndarray:
    """
    Build the n x n assignment cost matrix.

    Cost is the negated combined satisfaction, so minimizing cost maximizes
    the sum of satisfactions.

    Raises:
        SizeMismatchError: If the groups differ in size
    """
    validate_group_sizes(leads, juniors)
    return -satisfaction_matrix(leads, juniors, lead_prefs, junior_prefs)


def solve_assignment(cost: np.ndarray) -> np.ndarray:
    """
    Solve the minimum-cost assignment problem exactly.

    Args:
        cost: Square cost matrix

    Returns:
        Integer array where position i holds the column assigned to row i

    Raises:
        AssignmentError: If the matrix is not square or the solver fails
    """
    cost = np.asarray(cost)

    if cost.ndim != 2 or cost.shape[0] != cost.shape[1]:
        raise AssignmentError(f"Cost matrix must be square, got shape {cost.shape}")

    if cost.shape[0] == 0:
        return np.zeros(0, dtype=np.int64)

    try:
        row_indices, col_indices = linear_sum_assignment(cost)
    except ValueError as e:
        raise AssignmentError(f"Assignment solver failed: {e}") from e

    permutation = np.empty(cost.shape[0], dtype=np.int64)
    permutation[row_indices] = col_indices
    return permutation


def hungarian_seed(
    leads: Sequence[Participant],
    juniors: Sequence[Participant],
    lead_prefs: Dict[int, Wishlist],
    junior_prefs: Dict[int, Wishlist]
) -> np.ndarray:
    """
    Compute the optimal-sum pairing used as the first candidate.

    Args:
        leads: Team leads
        juniors: Juniors
        lead_prefs: Lead wishlists keyed by owner ID
        junior_prefs: Junior wishlists keyed by owner ID

    Returns:
        Permutation mapping lead index to junior index

    Raises:
        SizeMismatchError: If the groups differ in size
        AssignmentError: If the solver fails
    """
    cost = build_cost_matrix(leads, juniors, lead_prefs, junior_prefs)
    return solve_assignment(cost)
