"""
Core data models for the Enterprise Confidence Index.
"""

from .schemas import (
    RATING_DIMENSIONS,
    ReviewRatings,
    MarketPosition,
    ScoreResult,
    HistorySnapshot,
    display_round,
)

__all__ = [
    "RATING_DIMENSIONS",
    "ReviewRatings",
    "MarketPosition",
    "ScoreResult",
    "HistorySnapshot",
    "display_round",
]
