"""
Breadth-first shortest-path solver.

The search is a lazy, level-ordered stream of (state, history) pairs. Each level
holds every state first reached in exactly k moves; a whole level is recorded as
explored before it is expanded, so the stream comes out in ascending history length
without ever comparing lengths.

History is a tuple with the most recent move first. Solutions are returned in
execution order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Any, Generic, Hashable, Iterable, Iterator, Protocol, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
M = TypeVar("M")

History = tuple[Any, ...]
Path = tuple[Any, History]


class SearchProblem(Protocol[S, M]):
    """What the solver needs from a game."""

    @property
    def initial_state(self) -> S: ...

    def done(self, state: S) -> bool: ...

    def legal_neighbors(self, state: S) -> Iterable[tuple[S, M]]: ...


class TerminationReason(Enum):
    """Reason why exploration ended."""

    EXHAUSTED = "exhausted"  # No unexplored states remain
    MAX_DEPTH_REACHED = "max_depth_reached"  # Hit SearchConfig.max_depth


@dataclass(frozen=True)
class SearchConfig:
    """Limits governing exploration."""

    max_depth: int | None = None  # Last level (path length) to produce; None = unbounded

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(
                f"Invalid max_depth: {self.max_depth}\n"
                f"  Must be None (unbounded) or a level number >= 0"
            )


# =============================================================================
# Expansion
# =============================================================================


def neighbors_with_history(
    problem: SearchProblem[S, M], state: S, history: History
) -> list[Path]:
    """
    Pair every legal neighbor of state with its augmented history.

    The move that produced each neighbor is prepended to history. No filtering of
    previously seen states happens here.
    """
    return [(neighbor, (move,) + history) for neighbor, move in problem.legal_neighbors(state)]


def new_neighbors_only(neighbors: Iterable[Path], explored: AbstractSet[Any]) -> Iterator[Path]:
    """
    Drop pairs whose state has already been explored, keeping order.

    Membership is checked as each pair is pulled, so states added to explored
    during iteration are filtered too. explored itself is never modified.
    """
    return (pair for pair in neighbors if pair[0] not in explored)


# =============================================================================
# Exploration
# =============================================================================


class ExplorationResult:
    """
    Iterator wrapper for explore() that tracks how far the search got.

    Usage:
        result = explore(problem, [(start, ())])
        for state, history in result:
            ...
        print(result.termination_reason)  # None while the search can still continue
    """

    def __init__(self, generator: Iterator[Path]):
        self._iterator = generator
        self.termination_reason: TerminationReason | None = None
        self.depth = -1  # Deepest level produced so far
        self.explored_count = 0

    def __iter__(self) -> Iterator[Path]:
        return self

    def __next__(self) -> Path:
        return next(self._iterator)


def explore(
    problem: SearchProblem[S, M],
    initial: Iterable[Path],
    explored: AbstractSet[Any] = frozenset(),
    config: SearchConfig = SearchConfig(),
) -> ExplorationResult:
    """
    Produce every path reachable from the initial level, level by level.

    Args:
        problem: Supplies legal neighbors for each state
        initial: The first level; all histories must have the same length
        explored: States already visited by earlier levels. Copied, not modified.
        config: Search limits

    Returns:
        ExplorationResult yielding (state, history) pairs in ascending history length.
        Nothing is computed beyond what is consumed.
    """
    result = ExplorationResult.__new__(ExplorationResult)
    result.termination_reason = None
    result.depth = -1
    result.explored_count = 0
    result._iterator = _explore_generator(problem, list(initial), set(explored), config, result)
    return result


def _explore_generator(
    problem: SearchProblem[S, M],
    level: list[Path],
    explored: set[Any],
    config: SearchConfig,
    result: ExplorationResult,
) -> Iterator[Path]:
    """Internal generator for explore(). Do not call directly."""
    # A level is never expanded until all of it is in explored
    while level:
        result.depth += 1
        explored.update(state for state, _ in level)
        result.explored_count = len(explored)
        logger.debug(
            "explore: level %d has %d states, %d explored",
            result.depth,
            len(level),
            len(explored),
        )

        yield from level

        if config.max_depth is not None and result.depth >= config.max_depth:
            result.termination_reason = TerminationReason.MAX_DEPTH_REACHED
            logger.info("explore: stopped at max_depth=%d", config.max_depth)
            return

        next_level: list[Path] = []
        for state, history in level:
            for neighbor, neighbor_history in new_neighbors_only(
                neighbors_with_history(problem, state, history), explored
            ):
                # Scheduled states count as explored so siblings are not repeated
                explored.add(neighbor)
                next_level.append((neighbor, neighbor_history))
        level = next_level

    result.termination_reason = TerminationReason.EXHAUSTED
    logger.info("explore: exhausted after %d levels, %d states", result.depth + 1, len(explored))


# =============================================================================
# Solver
# =============================================================================


class Solver(Generic[S, M]):
    """Shortest solutions for a SearchProblem."""

    def __init__(self, problem: SearchProblem[S, M], config: SearchConfig = SearchConfig()) -> None:
        self.problem = problem
        self.config = config

    def paths_from_start(self) -> ExplorationResult:
        """All paths from the initial state, shortest first, each state once."""
        return explore(self.problem, [(self.problem.initial_state, ())], set(), self.config)

    def paths_to_goal(self) -> Iterator[Path]:
        """Paths ending in a winning state, shortest first."""
        return (pair for pair in self.paths_from_start() if self.problem.done(pair[0]))

    def solution(self) -> list[M]:
        """
        A shortest list of moves to a winning state, first move first.

        Returns an empty list both when the start already wins and when no winning
        state is reachable.
        """
        first = next(self.paths_to_goal(), None)
        if first is None:
            logger.info("solution: goal unreachable")
            return []

        _, history = first
        logger.info("solution: found %d moves", len(history))
        return list(reversed(history))


def solve(problem: SearchProblem[S, M], config: SearchConfig = SearchConfig()) -> list[M]:
    """Shortcut for Solver(problem, config).solution()."""
    return Solver(problem, config).solution()
