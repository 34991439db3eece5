"""
Genetic search for team building.

TeamBuilder runs a fixed number of generations over a population of
candidate pairings:

    1. Initial population: optimal-assignment seed + random permutations
    2. Each generation: score, sort, keep the elite, fill the rest with
       children from tournament-selected parents (crossover + mutation)
    3. After the last generation: score once more and return the best
"""

from typing import Dict, Iterable, List, Optional, Sequence, Any
import time
import numpy as np

from .data_models import Participant, Wishlist, Team, MatchingProblem, SearchResult
from .preferences import build_preference_map, satisfaction_matrix
from .assignment import validate_group_sizes, hungarian_seed
from .fitness import CLAMP, STRICT, create_teams, score_candidate, score_population
from .selection import tournament_select
from .crossover import apply_crossover
from .mutation import random_permutation, swap_mutation
from .repair import repair_permutation, is_valid_permutation
from .config import merge_with_defaults


def _check_unique_ids(leads: Sequence[Participant], juniors: Sequence[Participant]) -> None:
    """Raise ValueError if any participant ID is used twice across both groups."""
    seen = set()
    for participant in list(leads) + list(juniors):
        if participant.id in seen:
            raise ValueError(f"Duplicate participant id: {participant.id}")
        seen.add(participant.id)


def build_problem(
    leads: Iterable[Participant],
    juniors: Iterable[Participant],
    lead_wishlists: Iterable[Wishlist],
    junior_wishlists: Iterable[Wishlist]
) -> MatchingProblem:
    """
    Validate inputs and precompute the satisfaction matrix.

    Participants without a wishlist are allowed; they score 0 against
    everyone.

    Raises:
        SizeMismatchError: If the groups differ in size
        ValueError: On duplicate participant IDs or duplicate wishlists
    """
    leads = tuple(leads)
    juniors = tuple(juniors)

    validate_group_sizes(leads, juniors)
    _check_unique_ids(leads, juniors)

    lead_prefs = build_preference_map(lead_wishlists)
    junior_prefs = build_preference_map(junior_wishlists)

    return MatchingProblem(
        leads=leads,
        juniors=juniors,
        lead_prefs=lead_prefs,
        junior_prefs=junior_prefs,
        satisfaction=satisfaction_matrix(leads, juniors, lead_prefs, junior_prefs),
    )


class TeamBuilder:
    """
    Hybrid Hungarian + genetic team building strategy.

    Args:
        config: GA parameter overrides (see config.DEFAULT_CONFIG)
        rng: Random number generator; created from config['random_seed']
            (or a fresh seed) when not given
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, rng: Optional[np.random.Generator] = None):
        self.config = merge_with_defaults(config)

        if rng is None:
            seed = self.config['random_seed']
            if seed is None:
                seed = int(np.random.randint(0, 2**31))
            self.seed = seed
            self.rng = np.random.default_rng(seed)
        else:
            self.seed = None
            self.rng = rng

    def build_teams(
        self,
        leads: Iterable[Participant],
        juniors: Iterable[Participant],
        lead_wishlists: Iterable[Wishlist],
        junior_wishlists: Iterable[Wishlist]
    ) -> List[Team]:
        """Pair every team lead with one junior. Shortcut for search(...).teams."""
        return self.search(leads, juniors, lead_wishlists, junior_wishlists).teams

    def search(
        self,
        leads: Iterable[Participant],
        juniors: Iterable[Participant],
        lead_wishlists: Iterable[Wishlist],
        junior_wishlists: Iterable[Wishlist]
    ) -> SearchResult:
        """
        Run the genetic search.

        Args:
            leads: Team leads
            juniors: Juniors (same count as leads)
            lead_wishlists: Wishlists of team leads
            junior_wishlists: Wishlists of juniors

        Returns:
            SearchResult with the best teams found

        Raises:
            SizeMismatchError: If the groups differ in size
            AssignmentError: If the assignment solver fails
            ValueError: On duplicate IDs or wishlists
        """
        problem = build_problem(leads, juniors, lead_wishlists, junior_wishlists)
        return self.search_problem(problem)

    def search_problem(self, problem: MatchingProblem) -> SearchResult:
        """Run the genetic search on an already validated problem."""
        start_time = time.time()
        n = problem.size
        epsilon = self.config['epsilon']
        verbose = self.config['verbose']

        if n == 0:
            return SearchResult(
                teams=[],
                permutation=np.zeros(0, dtype=np.int64),
                best_score=0.0,
                report_score=0.0,
                history=[],
                seed=self.seed,
                metadata=self._metadata(start_time),
            )

        seed_candidate = hungarian_seed(problem.leads, problem.juniors, problem.lead_prefs, problem.junior_prefs)
        population = self.initial_population(seed_candidate, n)

        if verbose:
            print(f"Seed score: {score_candidate(seed_candidate, problem, CLAMP, epsilon):.4f}")

        history = []
        generations = self.config['generations']

        for gen in range(generations):
            scores = score_population(population, problem, CLAMP, epsilon)

            # Stable sort keeps row order among equal scores
            order = np.argsort(-scores, kind='stable')
            population = population[order]
            scores = scores[order]
            history.append(float(scores[0]))

            if verbose:
                print(f"  Generation {gen + 1}/{generations}: best={scores[0]:.4f} mean={scores.mean():.4f}")

            population = self.next_generation(population, scores)

        final_scores = score_population(population, problem, CLAMP, epsilon)
        best_idx = int(np.argmax(final_scores))
        history.append(float(final_scores[best_idx]))

        best = population[best_idx].copy()
        teams = create_teams(best, problem.leads, problem.juniors)
        valid = is_valid_permutation(best)

        if not valid:
            print(f"Warning: best candidate assigns some juniors more than once ({len(teams)} teams, "
                  f"{len({t.junior.id for t in teams})} distinct juniors)")

        return SearchResult(
            teams=teams,
            permutation=best,
            best_score=float(final_scores[best_idx]),
            report_score=score_candidate(best, problem, STRICT, epsilon),
            history=history,
            seed=self.seed,
            is_valid=valid,
            metadata=self._metadata(start_time),
        )

    def initial_population(self, seed_candidate: np.ndarray, n: int) -> np.ndarray:
        """
        Seed candidate followed by population_size - 1 random permutations.

        Returns:
            Integer array of shape (population_size, n)
        """
        population = np.empty((self.config['population_size'], n), dtype=np.int64)
        population[0] = seed_candidate

        for i in range(1, len(population)):
            population[i] = random_permutation(n, self.rng)

        return population

    def next_generation(self, population: np.ndarray, scores: np.ndarray) -> np.ndarray:
        """
        Breed the next generation.

        Args:
            population: Current population sorted by descending score
            scores: Scores matching population row by row

        Returns:
            New population; row 0 is the elite of the current one
        """
        size = self.config['population_size']
        crossover_rate = self.config['crossover_rate']
        mutation_rate = self.config['mutation_rate']
        tournament_size = self.config['tournament_size']
        repair_children = self.config['repair_children']

        new_population = np.empty((size, population.shape[1]), dtype=np.int64)
        new_population[0] = population[0]
        count = 1

        while count < size:
            parent_a = tournament_select(population, scores, tournament_size, self.rng)
            parent_b = tournament_select(population, scores, tournament_size, self.rng)

            if self.rng.random() < crossover_rate:
                child_a, child_b = apply_crossover(parent_a, parent_b, self.config, self.rng)
            else:
                child_a, child_b = parent_a.copy(), parent_b.copy()

            if repair_children:
                child_a = repair_permutation(child_a)
                child_b = repair_permutation(child_b)

            swap_mutation(child_a, mutation_rate, self.rng)
            swap_mutation(child_b, mutation_rate, self.rng)

            new_population[count] = child_a
            count += 1
            if count < size:
                new_population[count] = child_b
                count += 1

        return new_population

    def _metadata(self, start_time: float) -> Dict[str, Any]:
        """Plain-typed run information for result sidecars."""
        return {
            'elapsed_seconds': round(time.time() - start_time, 4),
            'config': {k: v for k, v in self.config.items()},
        }
