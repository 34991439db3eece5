"""
Team Building GA

This package pairs team leads with juniors so that the harmonic mean of
per-team satisfaction is as high as possible. A genetic algorithm searches
the space of pairings, seeded with an optimal assignment (Hungarian
algorithm) solution.

Key Features:
- Harmonic-mean fitness (one unhappy team drags the whole score down)
- Optimal assignment seed via scipy's linear_sum_assignment
- Strict elitism (best score never decreases between generations)
- Injectable numpy random generator for reproducible runs

Modules:
- data_models: Core data structures (Participant, Wishlist, Team, MatchingProblem)
- preferences: Wishlist scoring and satisfaction matrix
- assignment: Cost matrix and optimal assignment seed
- fitness: Team construction and harmonic-mean scoring
- selection: Tournament selection
- crossover: Single-point and order crossover operators
- mutation: Random permutations and swap mutation
- repair: Permutation validity checks and repair
- engine: Population management and the evolutionary search loop
- config: GA configuration defaults, loading and validation
- io_utils: CSV I/O, metadata sidecars, random problem generation
- benchmark: Repeated runs on random data
- visualization: Convergence and satisfaction plots
- cli: Command-line interface for match and benchmark modes
"""

__version__ = "0.1.0"
__author__ = "Hackathon Team Building Team"

from .data_models import Participant, Wishlist, Team, MatchingProblem, SearchResult
from .engine import TeamBuilder

__all__ = [
    "Participant",
    "Wishlist",
    "Team",
    "MatchingProblem",
    "SearchResult",
    "TeamBuilder",
]
