from __future__ import annotations

"""Configuration, schema models, and pair-loading utilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .distance import DEFAULT_PREFIX_LIMIT, DEFAULT_SCALING_FACTOR
from .utils import jsonio


class PairModel(BaseModel):
    """One left/right comparison read from a pairs file."""

    id: Optional[str] = None
    left: str
    right: str


class SettingsModel(BaseModel):
    """Defaults for batch scoring, usually read from ``fuzzykit.yaml``."""

    metric: str = "levenshtein"
    threshold: Optional[int] = Field(default=None, ge=0)
    scaling_factor: float = Field(default=DEFAULT_SCALING_FACTOR, ge=0.0)
    prefix_limit: int = Field(default=DEFAULT_PREFIX_LIMIT, ge=0)
    casefold: bool = False
    limit: Optional[int] = Field(default=None, ge=0)
    log_level: str = "WARNING"

    @model_validator(mode="after")
    def check_winkler_bounds(self) -> "SettingsModel":
        if self.scaling_factor * self.prefix_limit > 1:
            raise ValueError("scaling_factor * prefix_limit must not exceed 1")
        return self

    def metric_params(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`fuzzykit.metrics.get_metric`."""

        return metric_params(
            self.metric,
            threshold=self.threshold,
            scaling_factor=self.scaling_factor,
            prefix_limit=self.prefix_limit,
        )


def metric_params(
    metric: str,
    *,
    threshold: Optional[int] = None,
    scaling_factor: float = DEFAULT_SCALING_FACTOR,
    prefix_limit: int = DEFAULT_PREFIX_LIMIT,
) -> Dict[str, Any]:
    if metric == "levenshtein_bounded":
        return {"threshold": threshold}
    if metric == "jaro_winkler":
        return {"scaling_factor": scaling_factor, "prefix_limit": prefix_limit}
    return {}


def resolve_metric_name(metric: str, threshold: Optional[int]) -> str:
    """A threshold on plain ``levenshtein`` selects the bounded variant."""

    if metric == "levenshtein" and threshold is not None:
        return "levenshtein_bounded"
    return metric


@dataclass(frozen=True)
class ProjectPaths:
    """Canonical locations searched for settings."""

    working_dir: Path
    settings_file: Path


def _default_paths() -> ProjectPaths:
    cwd = Path.cwd()
    return ProjectPaths(working_dir=cwd, settings_file=cwd / "fuzzykit.yaml")


PATHS = _default_paths()


class SettingsNotFoundError(FileNotFoundError):
    """Raised when an explicitly requested settings file is missing."""


class PairsNotFoundError(FileNotFoundError):
    """Raised when a pairs file cannot be located."""


def load_settings(
    path: Optional[Path] = None, *, paths: ProjectPaths = PATHS
) -> SettingsModel:
    """Load settings from *path*, or from ``fuzzykit.yaml`` if present.

    Without an explicit path a missing default file yields the built-in
    defaults.
    """

    settings_path = path or paths.settings_file
    if not settings_path.exists():
        if path is not None:
            raise SettingsNotFoundError(f"Settings file not found at {settings_path}")
        return SettingsModel()
    with settings_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return SettingsModel.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {settings_path}: {exc}") from exc


def load_pairs(path: Path) -> List[PairModel]:
    """Read and validate every pair in a JSONL file."""

    if not path.exists():
        raise PairsNotFoundError(f"Pairs file not found at {path}")
    pairs: List[PairModel] = []
    for entry_no, entry in enumerate(jsonio.read_jsonl(path), start=1):
        try:
            pair = PairModel.model_validate(entry)
        except ValidationError as exc:
            raise ValueError(f"Invalid pair #{entry_no} in {path}: {exc}") from exc
        if pair.id is None:
            pair = pair.model_copy(update={"id": f"pair-{entry_no}"})
        pairs.append(pair)
    return pairs


def select_pairs(pairs: Iterable[PairModel], *, limit: Optional[int] = None) -> List[PairModel]:
    """Take pairs from the front of the list, honouring *limit*."""

    selected = list(pairs)
    if limit is not None:
        return selected[: max(limit, 0)]
    return selected
