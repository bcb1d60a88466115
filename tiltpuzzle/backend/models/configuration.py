"""The contract every searchable puzzle state satisfies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Configuration(ABC):
    """One state of an implicitly-defined search graph.

    Implementations must be immutable and must define ``__eq__`` and
    ``__hash__`` over their domain content, so that the solver can
    deduplicate states that are equal but not identical.  Frozen
    dataclasses satisfy this for free.
    """

    @abstractmethod
    def is_goal(self) -> bool:
        """Return True if this state solves the puzzle."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if this state is legal.

        Depth-first search refuses to descend into invalid states.
        """

    @abstractmethod
    def successors(self) -> list[Configuration]:
        """Return the states one transition away, in a deterministic order."""
