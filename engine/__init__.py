from .scorer import (
    ScoreEngine, compute_score, classify_market_position,
    generate_insight,
)
from .history import HistoryRecorder, HistoryUnavailableError

__all__ = [
    "ScoreEngine", "compute_score", "classify_market_position",
    "generate_insight",
    "HistoryRecorder", "HistoryUnavailableError",
]
