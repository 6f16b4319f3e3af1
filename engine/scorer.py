"""
Enterprise Confidence Index (ECI) Score Engine
----------------------------------------------
Turns a startup's enterprise reviews and upvote count into a ScoreResult:

  BaseScore   = Σ_d (mean_d / 5) * 25          d ∈ {roi, scalability, security, integration}
  Adoption    = min(upvotes * 1.5, 15)
  Volume      = min(n * 2, 10)
  ECI         = min(BaseScore + Adoption + Volume, 100)
  Trending    = upvotes * 2 + n * 5

Market position is a 2x2 quadrant over (ECI >= 70, upvotes >= 5).
Thresholds are applied to unrounded values; rounding happens only when the
result is displayed or stored.

Input:  Sequence[ReviewRatings], upvotes
Output: ScoreResult
"""

import logging
import numpy as np
from typing import Iterable, Optional, Sequence

from config.settings import settings
from models.schemas import RATING_DIMENSIONS, MarketPosition, ReviewRatings, ScoreResult

logger = logging.getLogger(__name__)


NO_REVIEWS_INSIGHT = "No enterprise reviews yet."
HIGH_CONFIDENCE_INSIGHT = "High enterprise confidence. Strong performance and market traction."
MODERATE_CONFIDENCE_INSIGHT = "Moderate enterprise confidence. Growing adoption momentum."
EMERGING_PROFILE_INSIGHT = "Emerging enterprise profile. Requires validation and traction."


# ─── Component Functions ─────────────────────────────────────────────────────


def is_complete(review: ReviewRatings) -> bool:
    """Only reviews rated on every dimension count toward the score."""
    return all(getattr(review, d, None) is not None for d in RATING_DIMENSIONS)


def dimension_means(reviews: Sequence[ReviewRatings]) -> np.ndarray:
    """Arithmetic mean of each rating dimension, in RATING_DIMENSIONS order."""
    matrix = np.array(
        [[getattr(r, d) for d in RATING_DIMENSIONS] for r in reviews],
        dtype=float,
    )
    return matrix.sum(axis=0) / len(reviews)


def base_score(
    means: Iterable[float],
    scale: int = settings.RATING_SCALE,
    weight: float = settings.DIMENSION_WEIGHT,
) -> float:
    """Rating-quality component: each dimension worth up to `weight` points."""
    return float(sum((m / scale) * weight for m in means))


def adoption_boost(
    upvotes: int,
    per_upvote: float = settings.ADOPTION_BOOST_PER_UPVOTE,
    cap: float = settings.ADOPTION_BOOST_CAP,
) -> float:
    return min(upvotes * per_upvote, cap)


def review_confidence(
    n: int,
    per_review: float = settings.REVIEW_CONFIDENCE_PER_REVIEW,
    cap: float = settings.REVIEW_CONFIDENCE_CAP,
) -> float:
    return min(n * per_review, cap)


def trending_score(upvotes: int, n: int) -> int:
    """Ranking-only value. Uncapped and never compared against thresholds."""
    return upvotes * settings.TRENDING_UPVOTE_WEIGHT + n * settings.TRENDING_REVIEW_WEIGHT


def classify_market_position(
    confidence_index: float,
    upvotes: int,
    confidence_threshold: float = settings.LEADER_CONFIDENCE_THRESHOLD,
    upvote_threshold: int = settings.LEADER_UPVOTE_THRESHOLD,
) -> MarketPosition:
    """
    Quadrant lookup. Both thresholds are inclusive:

      confident & adopted     → Leader
      confident only          → Visionary
      adopted only            → Challenger
      neither                 → Emerging
    """
    confident = confidence_index >= confidence_threshold
    adopted = upvotes >= upvote_threshold

    if confident and adopted:
        return MarketPosition.LEADER
    if confident:
        return MarketPosition.VISIONARY
    if adopted:
        return MarketPosition.CHALLENGER
    return MarketPosition.EMERGING


def generate_insight(
    confidence_index: float,
    high: float = settings.HIGH_INSIGHT_THRESHOLD,
    moderate: float = settings.MODERATE_INSIGHT_THRESHOLD,
) -> str:
    """Plain-English verdict from the confidence index alone."""
    if confidence_index >= high:
        return HIGH_CONFIDENCE_INSIGHT
    if confidence_index >= moderate:
        return MODERATE_CONFIDENCE_INSIGHT
    return EMERGING_PROFILE_INSIGHT


# ─── ScoreEngine ─────────────────────────────────────────────────────────────


class ScoreEngine:
    """
    Stateless ECI calculator.
    Quadrant thresholds default to settings and may be overridden at init.
    """

    def __init__(
        self,
        confidence_threshold: Optional[float] = None,
        upvote_threshold: Optional[int] = None,
    ):
        self.confidence_threshold = (
            confidence_threshold if confidence_threshold is not None
            else settings.LEADER_CONFIDENCE_THRESHOLD
        )
        self.upvote_threshold = (
            upvote_threshold if upvote_threshold is not None
            else settings.LEADER_UPVOTE_THRESHOLD
        )

    def compute(self, reviews: Optional[Sequence[ReviewRatings]], upvotes: int) -> ScoreResult:
        reviews = [r for r in (reviews or []) if is_complete(r)]
        n = len(reviews)

        if n == 0:
            return ScoreResult(
                base_score=0.0,
                confidence_index=0.0,
                adoption_momentum=upvotes,
                review_count=0,
                market_position=MarketPosition.EMERGING,
                trending_score=trending_score(upvotes, 0),
                insight=NO_REVIEWS_INSIGHT,
            )

        base = base_score(dimension_means(reviews))
        boost = adoption_boost(upvotes)
        volume = review_confidence(n)
        eci = min(base + boost + volume, settings.CONFIDENCE_CAP)

        position = classify_market_position(
            eci, upvotes, self.confidence_threshold, self.upvote_threshold
        )

        logger.debug(
            f"ECI computed: base={base:.2f} boost={boost:.1f} volume={volume:.1f} "
            f"eci={eci:.2f} n={n} upvotes={upvotes} → {position.value}"
        )

        return ScoreResult(
            base_score=base,
            confidence_index=eci,
            adoption_momentum=upvotes,
            review_count=n,
            market_position=position,
            trending_score=trending_score(upvotes, n),
            insight=generate_insight(eci),
            adoption_boost=boost,
            review_confidence=volume,
        )

    def __repr__(self):
        return (
            f"<ScoreEngine: eci>={self.confidence_threshold} "
            f"upvotes>={self.upvote_threshold}>"
        )


_default_engine = ScoreEngine()


def compute_score(reviews: Optional[Sequence[ReviewRatings]], upvotes: int) -> ScoreResult:
    """Score a startup with the default thresholds."""
    return _default_engine.compute(reviews, upvotes)
