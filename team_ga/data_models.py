"""
Data models for team building.

Core data structures representing participants, wishlists, teams and the
validated matching problem handed to the genetic search.
"""

from dataclasses import dataclass, field
from typing import Optional, Any

import numpy as np


@dataclass(frozen=True)
class Participant:
    """
    A team lead or a junior.

    Attributes:
        id: Unique identifier (unique across both groups)
        name: Display name
    """
    id: int
    name: str


@dataclass
class Wishlist:
    """
    Ranked preferences of one participant over the opposite group.

    Attributes:
        owner_id: ID of the participant who owns this wishlist
        desired_ids: Partner IDs, most preferred first
    """
    owner_id: int
    desired_ids: tuple[int, ...]
    _ranks: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Normalize desired IDs to a tuple and index ranks."""
        self.desired_ids = tuple(int(i) for i in self.desired_ids)
        ranks = {}
        for rank, partner_id in enumerate(self.desired_ids):
            # First occurrence wins
            ranks.setdefault(partner_id, rank)
        self._ranks = ranks

    def rank_of(self, partner_id: int) -> Optional[int]:
        """
        Get rank position of a partner.

        Args:
            partner_id: Partner to look up

        Returns:
            Zero-based rank (0 = most preferred), or None if unranked
        """
        return self._ranks.get(partner_id)

    def __len__(self) -> int:
        """Number of ranked partners."""
        return len(self.desired_ids)


@dataclass(frozen=True)
class Team:
    """One team lead paired with one junior."""
    team_lead: Participant
    junior: Participant


@dataclass(frozen=True)
class MatchingProblem:
    """
    Validated inputs for one search.

    Built once per search and treated as read-only afterwards.

    Attributes:
        leads: Team leads, in lead-index order
        juniors: Juniors, in junior-index order
        lead_prefs: Wishlists of team leads keyed by owner ID
        junior_prefs: Wishlists of juniors keyed by owner ID
        satisfaction: n x n matrix, entry [i, j] is the combined score of
            pairing leads[i] with juniors[j]
    """
    leads: tuple[Participant, ...]
    juniors: tuple[Participant, ...]
    lead_prefs: dict[int, Wishlist]
    junior_prefs: dict[int, Wishlist]
    satisfaction: np.ndarray

    @property
    def size(self) -> int:
        """Number of teams to build."""
        return len(self.leads)


@dataclass
class SearchResult:
    """
    Outcome of one genetic search.

    Attributes:
        teams: Teams derived from the best candidate
        permutation: Best candidate (lead index -> junior index)
        best_score: Fitness of the best candidate (epsilon-clamped, as used by the search)
        report_score: Harmonic mean of the teams with zero-collapse (any unsatisfied team -> 0)
        history: Best fitness of each scored population, initial one first
        seed: Random seed the generator was created from (None if injected)
        is_valid: Whether the best candidate is a permutation
        metadata: Additional information (config snapshot, timings, etc.)
    """
    teams: list[Team]
    permutation: np.ndarray
    best_score: float
    report_score: float
    history: list[float]
    seed: Optional[int] = None
    is_valid: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert result summary to a plain dictionary for YAML export.

        Returns:
            Dictionary with serializable values (teams excluded)
        """
        return {
            "best_score": float(self.best_score),
            "report_score": float(self.report_score),
            "permutation": [int(j) for j in self.permutation],
            "history": [float(s) for s in self.history],
            "seed": self.seed,
            "is_valid": bool(self.is_valid),
            "teams": len(self.teams),
            **self.metadata,
        }
