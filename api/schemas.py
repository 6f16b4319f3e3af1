"""
Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


# ─── Request Schemas ─────────────────────────────────────────────────────────

class CreateStartupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    tagline: Optional[str] = None
    industry: Optional[str] = Field(None, max_length=100)
    stage: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    early_access: bool = False
    deal_text: Optional[str] = None


class CreateReviewRequest(BaseModel):
    startup_id: int
    roi: int = Field(..., ge=1, le=5)
    scalability: Optional[int] = Field(None, ge=1, le=5, description="Defaults to 4 when omitted")
    security: int = Field(..., ge=1, le=5)
    integration: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class UpdateDealRequest(BaseModel):
    early_access: bool
    deal_text: Optional[str] = None


# ─── Response Schemas ────────────────────────────────────────────────────────

class StartupResponse(BaseModel):
    id: int
    name: str
    tagline: Optional[str] = None
    industry: Optional[str] = None
    stage: Optional[str] = None
    description: Optional[str] = None
    upvotes: int
    early_access: bool
    deal_text: Optional[str] = None
    created_at: Optional[datetime] = None
    review_count: Optional[int] = None
    trending_score: Optional[int] = None


class ReviewResponse(BaseModel):
    id: int
    startup_id: int
    roi: int
    scalability: int
    security: int
    integration: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


class UpvoteResponse(BaseModel):
    message: str
    upvotes: int


class ScoreResponse(BaseModel):
    score: int
    confidenceIndex: int
    adoptionMomentum: int
    reviewCount: int
    marketPosition: str
    quadrantEmoji: str
    trendingScore: int
    insight: str


class HistorySnapshotResponse(BaseModel):
    eci: int
    score: int
    upvotes: int
    review_count: int
    recorded_at: datetime


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
