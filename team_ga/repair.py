"""
Permutation repair.

Single-point crossover can assign the same junior to several leads and leave
others without a lead. Repair keeps the first occurrence of every junior and
hands the missing juniors, in ascending order, to the later duplicates.
"""

from typing import List
import numpy as np


def is_valid_permutation(candidate: np.ndarray) -> bool:
    """Check that candidate uses each of 0..n-1 exactly once."""
    candidate = np.asarray(candidate)
    n = candidate.size
    if n == 0:
        return True
    if candidate.min() < 0 or candidate.max() >= n:
        return False
    return np.unique(candidate).size == n


def find_duplicates(candidate: np.ndarray) -> List[int]:
    """
    Positions holding a junior already used earlier in the candidate.

    Args:
        candidate: Candidate to check

    Returns:
        Sorted list of positions to reassign
    """
    seen = set()
    duplicates = []
    n = len(candidate)

    for position, value in enumerate(np.asarray(candidate).tolist()):
        if value in seen or not 0 <= value < n:
            duplicates.append(position)
        else:
            seen.add(value)

    return duplicates


def repair_permutation(candidate: np.ndarray) -> np.ndarray:
    """
    Turn a candidate into a valid permutation.

    Args:
        candidate: Candidate of length n, possibly with repeated or
            out-of-range values

    Returns:
        New array; unchanged copy if the candidate was already valid
    """
    repaired = np.array(candidate, dtype=np.int64, copy=True)
    duplicates = find_duplicates(repaired)

    if not duplicates:
        return repaired

    duplicate_set = set(duplicates)
    used = {int(v) for p, v in enumerate(repaired) if p not in duplicate_set}
    missing = [v for v in range(len(repaired)) if v not in used]

    for position, value in zip(duplicates, missing):
        repaired[position] = value

    return repaired
