"""Water buckets puzzle: measure an amount by filling, dumping and pouring."""

from __future__ import annotations

from dataclasses import dataclass, field

from tiltpuzzle.backend.models.configuration import Configuration


@dataclass(frozen=True)
class WaterConfig(Configuration):
    """Current bucket contents.

    ``capacities`` and ``amount`` describe the puzzle and are shared by
    every state of it, so only ``buckets`` takes part in equality.
    """

    buckets: tuple[int, ...]
    capacities: tuple[int, ...] = field(compare=False)
    amount: int = field(compare=False)

    @classmethod
    def empty(cls, capacities: tuple[int, ...], amount: int) -> WaterConfig:
        """All buckets empty, the usual starting state."""
        return cls(buckets=(0,) * len(capacities), capacities=capacities, amount=amount)

    def is_goal(self) -> bool:
        return self.amount in self.buckets

    def is_valid(self) -> bool:
        return all(0 <= b <= cap for b, cap in zip(self.buckets, self.capacities))

    def successors(self) -> list[Configuration]:
        """For each bucket: fill it, dump it, then pour every other bucket into it."""
        result: list[Configuration] = []
        for i, cap in enumerate(self.capacities):
            result.append(self._with({i: cap}))
            result.append(self._with({i: 0}))
            for j in range(len(self.buckets)):
                if i == j:
                    continue
                poured = min(self.buckets[j], cap - self.buckets[i])
                result.append(
                    self._with({i: self.buckets[i] + poured, j: self.buckets[j] - poured})
                )
        return result

    # -- helpers --------------------------------------------------------------

    def _with(self, changes: dict[int, int]) -> WaterConfig:
        buckets = tuple(changes.get(k, v) for k, v in enumerate(self.buckets))
        return WaterConfig(buckets=buckets, capacities=self.capacities, amount=self.amount)

    def __str__(self) -> str:
        return "[" + ", ".join(str(b) for b in self.buckets) + "]"
