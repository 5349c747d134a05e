from __future__ import annotations

"""Metric base class."""

from typing import Hashable, Sequence, Union

Score = Union[int, float]


class BaseMetric:
    name: str = "base"
    higher_is_better: bool = False

    def score(
        self, a: Sequence[Hashable] | str, b: Sequence[Hashable] | str
    ) -> Score:  # pragma: no cover - interface
        """Compare two inputs. Must be pure and symmetric."""

        raise NotImplementedError

    def describe(self) -> str:
        direction = "similarity" if self.higher_is_better else "distance"
        return f"{self.name} ({direction})"
