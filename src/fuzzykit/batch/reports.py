from __future__ import annotations

"""Helpers for loading and summarising batch artefacts."""

from pathlib import Path
from statistics import mean, median
from typing import Any, Dict, List, Optional

from ..utils import jsonio


def load_trace(run_path: Path) -> List[Dict[str, Any]]:
    trace_path = run_path / "trace.jsonl"
    if not trace_path.exists():
        raise FileNotFoundError(f"Trace not found at {trace_path}")
    return jsonio.read_jsonl(trace_path)


def summarise(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate scores; ``-1`` sentinels are counted, not averaged."""

    if not records:
        return {
            "num_pairs": 0,
            "num_scored": 0,
            "mean_score": None,
            "median_score": None,
            "min_score": None,
            "max_score": None,
            "exceeded_rate": None,
        }

    exceeded_flags: List[Optional[bool]] = [record.get("exceeded") for record in records]
    bounded = any(flag is not None for flag in exceeded_flags)
    scores = [
        record["score"]
        for record, flag in zip(records, exceeded_flags)
        if record.get("score") is not None and not flag
    ]

    return {
        "num_pairs": len(records),
        "num_scored": len(scores),
        "mean_score": mean(scores) if scores else None,
        "median_score": median(scores) if scores else None,
        "min_score": min(scores) if scores else None,
        "max_score": max(scores) if scores else None,
        "exceeded_rate": (
            sum(1 for flag in exceeded_flags if flag) / len(records) if bounded else None
        ),
    }


def write_report(run_path: Path, destination: Path | None = None) -> Path:
    records = load_trace(run_path)
    summary = summarise(records)
    target = destination or (run_path / "report.json")
    jsonio.write_json(target, {"summary": summary, "records": records})
    return target
