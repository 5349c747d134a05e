from __future__ import annotations

"""Metric registry."""

from typing import Any, Dict, Type

from .base_metric import BaseMetric, Score
from .builtin import (
    BoundedLevenshteinMetric,
    FuzzyMetric,
    JaroMetric,
    JaroWinklerMetric,
    LevenshteinMetric,
)

_METRICS: Dict[str, Type[BaseMetric]] = {
    LevenshteinMetric.name: LevenshteinMetric,
    BoundedLevenshteinMetric.name: BoundedLevenshteinMetric,
    JaroMetric.name: JaroMetric,
    JaroWinklerMetric.name: JaroWinklerMetric,
    FuzzyMetric.name: FuzzyMetric,
}


def get_metric(name: str, **params: Any) -> BaseMetric:
    try:
        metric_cls = _METRICS[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown metric '{name}', expected one of {sorted(_METRICS)}"
        ) from exc
    return metric_cls(**params)


def register_metric(metric_cls: Type[BaseMetric]) -> None:
    """Register a new metric class by its declared name."""

    if not getattr(metric_cls, "name", None) or metric_cls.name == BaseMetric.name:
        raise ValueError("Metric class must define a name")
    _METRICS[metric_cls.name] = metric_cls


def available_metrics() -> Dict[str, Type[BaseMetric]]:
    """Return the currently registered metric mapping."""

    return dict(_METRICS)


__all__ = [
    "BaseMetric",
    "Score",
    "get_metric",
    "register_metric",
    "available_metrics",
    "LevenshteinMetric",
    "BoundedLevenshteinMetric",
    "JaroMetric",
    "JaroWinklerMetric",
    "FuzzyMetric",
]
