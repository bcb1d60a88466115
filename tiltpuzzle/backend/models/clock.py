"""Clock puzzle: reach one hour from another by stepping the hand."""

from __future__ import annotations

from dataclasses import dataclass, field

from tiltpuzzle.backend.models.configuration import Configuration


@dataclass(frozen=True)
class ClockConfig(Configuration):
    """The hand position on a clock face numbered ``1..hours``."""

    current: int
    hours: int = field(compare=False)
    end: int = field(compare=False)

    def is_goal(self) -> bool:
        return self.current == self.end

    def is_valid(self) -> bool:
        return 1 <= self.current <= self.hours

    def successors(self) -> list[Configuration]:
        """One hour back, then one hour forward, wrapping around the face."""
        backward = self.current - 1 if self.current > 1 else self.hours
        forward = self.current + 1 if self.current < self.hours else 1
        return [self._at(backward), self._at(forward)]

    def _at(self, hour: int) -> ClockConfig:
        return ClockConfig(current=hour, hours=self.hours, end=self.end)

    def __str__(self) -> str:
        return str(self.current)
