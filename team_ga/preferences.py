"""
Wishlist scoring.

Turns ranked wishlists into integer desirability scores and builds the
combined satisfaction matrix shared by the assignment seed and the fitness
evaluator.
"""

from typing import Dict, Iterable, Optional, Sequence
import numpy as np

from .data_models import Participant, Wishlist, Team


def preference_score(wishlist: Optional[Wishlist], partner_id: int) -> int:
    """
    Score how much a wishlist owner wants a given partner.

    Args:
        wishlist: Owner's wishlist (None means the owner ranked nobody)
        partner_id: Candidate partner ID

    Returns:
        len(wishlist) - rank for ranked partners, 0 for unranked ones

    Example:
        Wishlist(owner_id=7, desired_ids=(5, 3, 1)) scores 5 -> 3, 3 -> 2,
        1 -> 1 and 99 -> 0.
    """
    if wishlist is None:
        return 0

    rank = wishlist.rank_of(partner_id)
    if rank is None:
        return 0

    return len(wishlist) - rank


def build_preference_map(wishlists: Iterable[Wishlist]) -> Dict[int, Wishlist]:
    """
    Index wishlists by owner ID.

    Args:
        wishlists: Wishlists of one group

    Returns:
        Dictionary mapping owner ID to wishlist

    Raises:
        ValueError: If an owner has more than one wishlist
    """
    prefs = {}
    for wishlist in wishlists:
        if wishlist.owner_id in prefs:
            raise ValueError(f"Duplicate wishlist for participant {wishlist.owner_id}")
        prefs[wishlist.owner_id] = wishlist
    return prefs


def team_satisfaction(
    team: Team,
    lead_prefs: Dict[int, Wishlist],
    junior_prefs: Dict[int, Wishlist]
) -> int:
    """Combined satisfaction of a team (lead side + junior side)."""
    lead_score = preference_score(lead_prefs.get(team.team_lead.id), team.junior.id)
    junior_score = preference_score(junior_prefs.get(team.junior.id), team.team_lead.id)
    return lead_score + junior_score


def satisfaction_matrix(
    leads: Sequence[Participant],
    juniors: Sequence[Participant],
    lead_prefs: Dict[int, Wishlist],
    junior_prefs: Dict[int, Wishlist]
) -> np.ndarray:
    """
    Build the combined satisfaction matrix.

    Args:
        leads: Team leads (rows)
        juniors: Juniors (columns)
        lead_prefs: Lead wishlists keyed by owner ID
        junior_prefs: Junior wishlists keyed by owner ID

    Returns:
        Integer array of shape (len(leads), len(juniors)) where entry [i, j]
        is the lead's score for juniors[j] plus the junior's score for leads[i]
    """
    matrix = np.zeros((len(leads), len(juniors)), dtype=np.int64)

    for i, lead in enumerate(leads):
        lead_wishlist = lead_prefs.get(lead.id)
        for j, junior in enumerate(juniors):
            matrix[i, j] = (
                preference_score(lead_wishlist, junior.id)
                + preference_score(junior_prefs.get(junior.id), lead.id)
            )

    return matrix
