from __future__ import annotations

"""Score many left/right pairs with one metric and persist the results."""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from ..config import (
    PairModel,
    SettingsModel,
    load_pairs,
    metric_params,
    resolve_metric_name,
    select_pairs,
)
from ..metrics import BaseMetric, Score, get_metric
from ..utils import jsonio
from .reports import summarise


@dataclass
class PairRecord:
    pair_id: str
    left: str
    right: str
    metric: str
    score: Score
    exceeded: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BatchRunner:
    def __init__(
        self,
        metric_name: str = "levenshtein",
        *,
        threshold: Optional[int] = None,
        casefold: bool = False,
        **metric_options: Any,
    ):
        self.metric_name = resolve_metric_name(metric_name, threshold)
        params = metric_params(self.metric_name, threshold=threshold, **metric_options)
        self.metric: BaseMetric = get_metric(self.metric_name, **params)
        self.casefold = casefold
        self.bounded = threshold is not None and self.metric_name == "levenshtein_bounded"

    @classmethod
    def from_settings(cls, settings: SettingsModel) -> "BatchRunner":
        return cls(
            settings.metric,
            threshold=settings.threshold,
            casefold=settings.casefold,
            scaling_factor=settings.scaling_factor,
            prefix_limit=settings.prefix_limit,
        )

    def score_pair(self, left: str, right: str) -> Score:
        if self.casefold:
            left, right = left.casefold(), right.casefold()
        return self.metric.score(left, right)

    def run_pairs(
        self, pairs: Iterable[PairModel], *, run_dir: Optional[Path] = None
    ) -> List[PairRecord]:
        results: List[PairRecord] = []
        for index, pair in enumerate(pairs, start=1):
            score = self.score_pair(pair.left, pair.right)
            record = PairRecord(
                pair_id=pair.id or f"pair-{index}",
                left=pair.left,
                right=pair.right,
                metric=self.metric_name,
                score=score,
                exceeded=(score == -1) if self.bounded else None,
            )
            logger.debug("{} {!r} vs {!r} -> {}", record.pair_id, pair.left, pair.right, score)
            results.append(record)
        logger.info("Scored {} pairs with {}", len(results), self.metric.describe())
        if run_dir is not None:
            persist_run(results, run_dir, metric=self.metric_name)
        return results

    def run_file(
        self,
        pairs_path: Path,
        *,
        limit: Optional[int] = None,
        run_dir: Optional[Path] = None,
    ) -> List[PairRecord]:
        pairs = select_pairs(load_pairs(pairs_path), limit=limit)
        logger.info("Loaded {} pairs from {}", len(pairs), pairs_path)
        return self.run_pairs(pairs, run_dir=run_dir)


def persist_run(
    run_records: Iterable[PairRecord],
    run_dir: Path,
    *,
    metric: str,
) -> None:
    records = list(run_records)
    run_dir.mkdir(parents=True, exist_ok=True)
    rows = [record.to_dict() for record in records]

    jsonio.write_jsonl(run_dir / "trace.jsonl", rows)
    jsonio.write_tsv(
        run_dir / "scores.tsv",
        ["pair_id", "score", "exceeded", "left", "right"],
        (
            [
                record.pair_id,
                f"{record.score:.4f}" if isinstance(record.score, float) else record.score,
                None if record.exceeded is None else int(record.exceeded),
                record.left,
                record.right,
            ]
            for record in records
        ),
    )

    summary = summarise(rows)
    summary["generated_at"] = datetime.now(timezone.utc).isoformat()
    summary["metric"] = metric
    jsonio.write_json(run_dir / "summary.json", summary)
    logger.info("Run artefacts written to {}", run_dir)
