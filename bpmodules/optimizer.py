"""Module loadout optimizer: randomized greedy + local search, exhaustive reference."""
import asyncio
import itertools
import logging
import math
import random
from collections.abc import Iterator, Sequence

from bpmodules.constants import MAX_PRIORITY_EFFECTS, SLOT_CHOICES
from bpmodules.errors import (
    InsufficientModules, InsufficientModulesAfterFilter, NoFeasibleSolution,
)
from bpmodules.filters import get_valid_modules, prefilter_by_attribute
from bpmodules.models import (
    DEFAULT_SEARCH_CONFIG, Module, OptimizationResult, SearchConfig, Solution,
)
from bpmodules.scoring import ModuleScorer, get_combined_effects

logger = logging.getLogger(__name__)


class SolutionPool:
    """Unique solutions found during one optimize call, in discovery order."""

    def __init__(self):
        self._solutions: dict[tuple[str, ...], Solution] = {}

    def add(self, solution: Solution) -> bool:
        """Insert unless a solution with the same members is already present."""
        if solution.key in self._solutions:
            return False
        self._solutions[solution.key] = solution
        return True

    def best(self) -> Solution | None:
        """Highest score; on ties the first one discovered wins."""
        best: Solution | None = None
        for solution in self._solutions.values():
            if best is None or solution.score > best.score:
                best = solution
        return best

    def __contains__(self, key: tuple[str, ...]) -> bool:
        return key in self._solutions

    def __len__(self) -> int:
        return len(self._solutions)


class ModuleOptimizer:
    """Finds a high-scoring set of modules for the equipped slots."""

    def __init__(self, config: SearchConfig = DEFAULT_SEARCH_CONFIG,
                 rng: random.Random | None = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def optimize(self, modules: Sequence[Module], num_slots: int,
                       priority_effects: Sequence[str]) -> OptimizationResult:
        """Best combination of num_slots modules found within the attempt budget.

        Yields to the event loop every ``config.yield_every`` attempts; that is
        the only point where the call suspends or can be cancelled.
        """
        _check_params(num_slots, priority_effects)
        cfg = self.config
        scorer = ModuleScorer(priority_effects)

        valid = get_valid_modules(modules)
        if len(valid) < num_slots:
            raise InsufficientModules(num_slots, len(valid))

        candidates = valid
        if len(valid) > cfg.full_search_limit:
            candidates = prefilter_by_attribute(valid, cfg.prefilter_top_k)
            if len(candidates) < num_slots:
                raise InsufficientModulesAfterFilter(num_slots, len(candidates))

        # Once every combination is in the pool there is nothing left to find
        reachable = math.comb(len(candidates), num_slots)
        pool = SolutionPool()
        attempts = 0

        while (attempts < cfg.max_attempts
               and len(pool) < cfg.target_solutions
               and len(pool) < reachable):
            attempts += 1
            initial = self._greedy_construct(candidates, num_slots, scorer)
            if not initial:
                logger.debug("Attempt %d: greedy construction failed", attempts)
            else:
                improved = self._refine(initial, candidates, scorer)
                members = tuple(candidates[i] for i in improved)
                key = tuple(sorted(m.id for m in members))
                if key in pool:
                    logger.debug("Attempt %d: duplicate solution %s", attempts, key)
                else:
                    pool.add(Solution(modules=members, score=scorer.score(members)))

            if attempts % cfg.yield_every == 0:
                await asyncio.sleep(0)

        best = pool.best()
        if best is None:
            raise NoFeasibleSolution(num_slots, attempts, len(candidates))

        logger.info(
            "Optimized %d modules (%d candidates) into %d slots: "
            "%d unique solutions in %d attempts, best score %d",
            len(valid), len(candidates), num_slots, len(pool), attempts, best.score,
        )
        return _build_result(best.modules, scorer)

    def optimize_sync(self, modules: Sequence[Module], num_slots: int,
                      priority_effects: Sequence[str]) -> OptimizationResult:
        """Blocking wrapper around optimize(); not usable inside a running event loop."""
        return asyncio.run(self.optimize(modules, num_slots, priority_effects))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _greedy_construct(self, candidates: Sequence[Module], num_slots: int,
                          scorer: ModuleScorer) -> list[int]:
        """Indices of num_slots candidates, or [] if the set can't be completed."""
        ranked = sorted(range(len(candidates)),
                        key=lambda i: scorer.prescore(candidates[i]), reverse=True)
        working = ranked[:self.config.greedy_pool_size]
        if not working:
            return []

        selected = [self.rng.choice(working)]
        for _ in range(num_slots - 1):
            chosen = [candidates[i] for i in selected]
            best: tuple[int, int] | None = None
            for i in working:
                if i in selected:
                    continue
                score = scorer.score(chosen + [candidates[i]])
                if best is None or score > best[0]:
                    best = (score, i)
            if best is None:
                return []
            selected.append(best[1])
        return selected

    # ------------------------------------------------------------------
    # Refinement
    # ------------------------------------------------------------------

    def _refine(self, selected: list[int], candidates: Sequence[Module],
                scorer: ModuleScorer) -> list[int]:
        """First-improvement hill climb over sampled single-slot swaps.

        Each iteration scans positions in order and accepts the first strictly
        better swap; an accepted swap ends that iteration, and the next one
        scans again from position 0. The relevant set is rebuilt every
        iteration, so a module swapped out can come back in.
        """
        cfg = self.config
        current = list(selected)
        current_score = scorer.score(candidates[i] for i in current)

        for iteration in range(cfg.refine_max_iterations):
            relevant = self._relevant_candidates(current, candidates, scorer)
            improved = False
            for pos in range(len(current)):
                in_use = set(current)
                unused = [i for i in relevant if i not in in_use]
                if not unused:
                    break
                sample = self.rng.sample(unused, min(cfg.refine_sample_size, len(unused)))
                for i in sample:
                    trial = current[:pos] + [i] + current[pos + 1:]
                    score = scorer.score(candidates[j] for j in trial)
                    if score > current_score:
                        current, current_score = trial, score
                        improved = True
                        break
                if improved:
                    break
            # plateau: stop once half the budget is spent without progress
            if not improved and (iteration + 1) * 2 >= cfg.refine_max_iterations:
                break
        return current

    def _relevant_candidates(self, current: list[int], candidates: Sequence[Module],
                             scorer: ModuleScorer) -> list[int]:
        """Swap pool: non-members touching a priority effect, or every module if too few."""
        in_solution = set(current)
        relevant = [
            i for i in range(len(candidates))
            if i not in in_solution and scorer.touches_priority(candidates[i])
        ]
        if len(relevant) < self.config.refine_min_relevant:
            return list(range(len(candidates)))
        return relevant


# ---------------------------------------------------------------------------
# Exhaustive reference solver
# ---------------------------------------------------------------------------

def get_combinations(modules: Sequence[Module], k: int) -> Iterator[tuple[Module, ...]]:
    """Every k-combination of modules, in index order."""
    return itertools.combinations(modules, k)


def optimize_exhaustive(modules: Sequence[Module], num_slots: int,
                        priority_effects: Sequence[str]) -> OptimizationResult:
    """Score every combination of the valid modules. Exact but unbounded."""
    _check_params(num_slots, priority_effects)
    scorer = ModuleScorer(priority_effects)
    valid = get_valid_modules(modules)
    if len(valid) < num_slots:
        raise InsufficientModules(num_slots, len(valid))

    best_combination: tuple[Module, ...] = ()
    max_score = -1
    for combination in get_combinations(valid, num_slots):
        score = scorer.score(combination)
        if score > max_score:
            max_score = score
            best_combination = combination
    return _build_result(best_combination, scorer)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

async def optimize(modules: Sequence[Module], num_slots: int,
                   priority_effects: Sequence[str], *,
                   rng: random.Random | None = None,
                   config: SearchConfig | None = None) -> OptimizationResult:
    optimizer = ModuleOptimizer(config or DEFAULT_SEARCH_CONFIG, rng)
    return await optimizer.optimize(modules, num_slots, priority_effects)


def optimize_sync(modules: Sequence[Module], num_slots: int,
                  priority_effects: Sequence[str], *,
                  rng: random.Random | None = None,
                  config: SearchConfig | None = None) -> OptimizationResult:
    optimizer = ModuleOptimizer(config or DEFAULT_SEARCH_CONFIG, rng)
    return optimizer.optimize_sync(modules, num_slots, priority_effects)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_params(num_slots: int, priority_effects: Sequence[str]) -> None:
    if num_slots not in SLOT_CHOICES:
        raise ValueError(f"num_slots must be one of {SLOT_CHOICES}, got {num_slots}")
    if len(priority_effects) > MAX_PRIORITY_EFFECTS:
        raise ValueError(
            f"At most {MAX_PRIORITY_EFFECTS} priority effects allowed, "
            f"got {len(priority_effects)}")
    if len(set(priority_effects)) != len(priority_effects):
        raise ValueError("Priority effects must be distinct")


def _build_result(combination: Sequence[Module], scorer: ModuleScorer) -> OptimizationResult:
    combined = get_combined_effects(combination)
    return OptimizationResult(
        total_score=scorer.score(combination),
        optimal_modules=list(combination),
        combined_effects=combined,
        prioritized_effects=scorer.prioritized(combined),
    )
