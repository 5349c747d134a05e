from .matrix import pairwise_matrix, rank_candidates
from .reports import load_trace, summarise, write_report
from .runner import BatchRunner, PairRecord, persist_run

__all__ = [
    "BatchRunner",
    "PairRecord",
    "persist_run",
    "load_trace",
    "summarise",
    "write_report",
    "pairwise_matrix",
    "rank_candidates",
]
