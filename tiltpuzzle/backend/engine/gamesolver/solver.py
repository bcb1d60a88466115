"""Puzzle-agnostic breadth-first and depth-first solver."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from tiltpuzzle.backend.models.configuration import Configuration
from tiltpuzzle.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a breadth-first search.

    ``path`` runs from the start state to the goal, or is ``None`` when no
    goal is reachable.  ``total_expansions`` counts every successor
    examined, revisits included; ``unique_configurations`` counts distinct
    states discovered.  Both count the start state.
    """

    path: tuple[Configuration, ...] | None
    total_expansions: int
    unique_configurations: int

    @property
    def solved(self) -> bool:
        return self.path is not None


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def search_bfs(start: Configuration) -> SearchResult:
        """Breadth-first search from *start*.

        The returned path has the fewest transitions of any path to a goal.
        Successors are deduplicated by equality only; configurations are
        expected to have filtered out invalid successors themselves.
        """
        logger.debug("bfs started", start=type(start).__name__)
        queue: deque[Configuration] = deque([start])
        predecessors: dict[Configuration, Configuration | None] = {start: None}
        total = 1
        unique = 1

        while queue and not queue[0].is_goal():
            current = queue.popleft()
            for neighbor in current.successors():
                total += 1
                if neighbor not in predecessors:
                    unique += 1
                    predecessors[neighbor] = current
                    queue.append(neighbor)

        if not queue:
            logger.debug("bfs exhausted", total=total, unique=unique)
            return SearchResult(path=None, total_expansions=total, unique_configurations=unique)

        path: list[Configuration] = []
        config: Configuration | None = queue[0]
        while config is not None:
            path.append(config)
            config = predecessors[config]
        path.reverse()

        logger.debug("bfs solved", total=total, unique=unique, steps=len(path) - 1)
        return SearchResult(
            path=tuple(path), total_expansions=total, unique_configurations=unique
        )

    @staticmethod
    def search_dfs(
        start: Configuration, max_depth: int | None = None
    ) -> Configuration | None:
        """Depth-first search returning the first goal found, or ``None``.

        Invalid successors are pruned but visited states are not tracked,
        so on a space with cycles (every tilt board has them) the caller
        must pass *max_depth*, the deepest number of transitions to try.
        """
        if start.is_goal():
            return start
        if max_depth is not None and max_depth <= 0:
            return None

        remaining = None if max_depth is None else max_depth - 1
        for child in start.successors():
            if not child.is_valid():
                continue
            solution = Solver.search_dfs(child, remaining)
            if solution is not None:
                return solution
        return None

    @staticmethod
    def hint(start: Configuration) -> Configuration | None:
        """Return the next state on a shortest solution, or ``None`` if solved / unsolvable."""
        result = Solver.search_bfs(start)
        if result.path is None or len(result.path) < 2:
            return None
        return result.path[1]
