"""
Core data models / schemas for the Enterprise Confidence Index.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Dict, Any
from datetime import datetime


RATING_DIMENSIONS = ("roi", "scalability", "security", "integration")


# ---------------------------------------------------------------------------
# Scoring inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReviewRatings:
    """One evaluator's ratings of a startup. Each dimension is 1–5."""
    roi: int
    scalability: int
    security: int
    integration: int
    comment: Optional[str] = None


# ---------------------------------------------------------------------------
# Market position quadrant
# ---------------------------------------------------------------------------

class MarketPosition(str, Enum):
    LEADER = "Leader"
    VISIONARY = "Visionary"
    CHALLENGER = "Challenger"
    EMERGING = "Emerging"

    @property
    def symbol(self) -> str:
        return _POSITION_SYMBOLS[self]


_POSITION_SYMBOLS = {
    MarketPosition.LEADER: "🏆",
    MarketPosition.VISIONARY: "🔭",
    MarketPosition.CHALLENGER: "⚡",
    MarketPosition.EMERGING: "🌱",
}


# ---------------------------------------------------------------------------
# Scoring output
# ---------------------------------------------------------------------------

def display_round(value: float) -> int:
    """Round half away from zero, matching how scores are shown to users."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


@dataclass(frozen=True)
class ScoreResult:
    base_score: float               # [0, 100], unrounded
    confidence_index: float         # [0, 100], unrounded, >= base_score
    adoption_momentum: int          # == upvotes
    review_count: int
    market_position: MarketPosition
    trending_score: int
    insight: str
    adoption_boost: float = 0.0
    review_confidence: float = 0.0

    @property
    def rounded_score(self) -> int:
        return display_round(self.base_score)

    @property
    def rounded_confidence(self) -> int:
        return display_round(self.confidence_index)

    @property
    def quadrant_emoji(self) -> str:
        return self.market_position.symbol

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.rounded_score,
            "confidenceIndex": self.rounded_confidence,
            "adoptionMomentum": self.adoption_momentum,
            "reviewCount": self.review_count,
            "marketPosition": self.market_position.value,
            "quadrantEmoji": self.quadrant_emoji,
            "trendingScore": self.trending_score,
            "insight": self.insight,
        }


# ---------------------------------------------------------------------------
# ECI history
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HistorySnapshot:
    entity_id: int
    eci: int
    base_score: int
    upvotes: int
    review_count: int
    recorded_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_result(
        cls, entity_id: int, result: ScoreResult, at: Optional[datetime] = None
    ) -> "HistorySnapshot":
        return cls(
            entity_id=entity_id,
            eci=result.rounded_confidence,
            base_score=result.rounded_score,
            upvotes=result.adoption_momentum,
            review_count=result.review_count,
            recorded_at=at or datetime.utcnow(),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["score"] = data.pop("base_score")
        data.pop("entity_id")
        return data
