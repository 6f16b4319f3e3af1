"""
Configuration & Settings
EthAum Enterprise Marketplace
"""

from pydantic import BaseModel
from typing import List
import os


class Settings(BaseModel):
    # App
    APP_NAME: str = "EthAum Enterprise Marketplace"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("ETHAUM_DEBUG", "false").lower() in ("1", "true", "yes")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./ethaum_marketplace.db")
    SEED_ON_STARTUP: bool = os.getenv("ETHAUM_SEED_ON_STARTUP", "false").lower() in ("1", "true", "yes")

    # Enterprise Confidence Index (ECI)
    # Each of the four rating dimensions contributes up to DIMENSION_WEIGHT
    # points, scaled linearly from its mean on a 1..RATING_SCALE scale.
    RATING_SCALE: int = 5
    DIMENSION_WEIGHT: float = 25.0
    ADOPTION_BOOST_PER_UPVOTE: float = 1.5
    ADOPTION_BOOST_CAP: float = 15.0
    REVIEW_CONFIDENCE_PER_REVIEW: float = 2.0
    REVIEW_CONFIDENCE_CAP: float = 10.0
    CONFIDENCE_CAP: float = 100.0

    # Market position quadrant (both thresholds inclusive)
    LEADER_CONFIDENCE_THRESHOLD: float = 70.0
    LEADER_UPVOTE_THRESHOLD: int = 5

    # Insight bands
    HIGH_INSIGHT_THRESHOLD: float = 80.0
    MODERATE_INSIGHT_THRESHOLD: float = 60.0

    # Ranking
    TRENDING_UPVOTE_WEIGHT: int = 2
    TRENDING_REVIEW_WEIGHT: int = 5
    TRENDING_LIMIT: int = 5

    # ECI history
    HISTORY_LIMIT: int = 20
    HISTORY_LIMIT_MAX: int = 100

    # Review ingestion
    DEFAULT_SCALABILITY: int = 4

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS: List[str] = ["*"]


settings = Settings()
