"""
FastAPI Route Handlers
EthAum Enterprise Marketplace
"""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Depends, BackgroundTasks, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.schemas import (
    CreateStartupRequest, CreateReviewRequest, UpdateDealRequest,
    StartupResponse, ReviewResponse, UpvoteResponse, ScoreResponse,
    HistorySnapshotResponse, HealthResponse,
)
from config.settings import settings
from db.database import get_db_dependency
from db.models import Startup
from db import repository
from db.repository import StartupNotFoundError
from engine import ScoreEngine, HistoryRecorder, HistoryUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()

_score_engine = ScoreEngine()
_history_recorder = HistoryRecorder()


def get_score_engine() -> ScoreEngine:
    return _score_engine


def get_history_recorder() -> HistoryRecorder:
    return _history_recorder


def _startup_response(
    startup: Startup,
    review_count: Optional[int] = None,
    trending_score: Optional[int] = None,
) -> StartupResponse:
    return StartupResponse(
        id=startup.id,
        name=startup.name,
        tagline=startup.tagline,
        industry=startup.industry,
        stage=startup.stage,
        description=startup.description,
        upvotes=startup.upvotes or 0,
        early_access=bool(startup.early_access),
        deal_text=startup.deal_text,
        created_at=startup.created_at,
        review_count=review_count,
        trending_score=trending_score,
    )


def _not_found(startup_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Startup {startup_id} not found.")


# ─── Health ──────────────────────────────────────────────────────────────────

@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    return HealthResponse(
        status="ok",
        version=settings.APP_VERSION,
        timestamp=datetime.utcnow(),
    )


# ─── Startups ────────────────────────────────────────────────────────────────

@router.get("/startups", response_model=List[StartupResponse], tags=["Startups"])
def get_startups(db: Session = Depends(get_db_dependency)):
    """All startups with review counts, most upvoted first."""
    try:
        rows = repository.list_startups(db)
    except SQLAlchemyError as e:
        logger.error(f"Listing startups failed: {e}")
        raise HTTPException(status_code=500, detail=f"Listing failed: {str(e)}")
    return [_startup_response(startup, review_count) for startup, review_count in rows]


@router.post("/startups", response_model=StartupResponse, tags=["Startups"])
def create_startup(request: CreateStartupRequest, db: Session = Depends(get_db_dependency)):
    try:
        startup = repository.create_startup(db, **request.model_dump())
    except SQLAlchemyError as e:
        logger.error(f"Creating startup failed: {e}")
        raise HTTPException(status_code=500, detail=f"Create failed: {str(e)}")
    return _startup_response(startup, review_count=0)


@router.get("/startups/trending", response_model=List[StartupResponse], tags=["Startups"])
def get_trending(
    limit: int = Query(settings.TRENDING_LIMIT, ge=1, le=50),
    db: Session = Depends(get_db_dependency),
):
    """Top startups by trending score (upvotes * 2 + reviews * 5)."""
    try:
        rows = repository.trending_startups(db, limit=limit)
    except SQLAlchemyError as e:
        logger.error(f"Trending query failed: {e}")
        raise HTTPException(status_code=500, detail=f"Trending failed: {str(e)}")
    return [
        _startup_response(startup, review_count, int(trending_score))
        for startup, review_count, trending_score in rows
    ]


@router.post("/startups/{startup_id}/upvote", response_model=UpvoteResponse, tags=["Startups"])
def upvote(startup_id: int, db: Session = Depends(get_db_dependency)):
    try:
        upvotes = repository.upvote_startup(db, startup_id)
    except StartupNotFoundError:
        raise _not_found(startup_id)
    except SQLAlchemyError as e:
        logger.error(f"Upvote failed for startup #{startup_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Upvote failed: {str(e)}")
    return UpvoteResponse(message="Upvoted", upvotes=upvotes)


@router.patch("/startups/{startup_id}/deal", response_model=StartupResponse, tags=["Startups"])
def update_deal(
    startup_id: int,
    request: UpdateDealRequest,
    db: Session = Depends(get_db_dependency),
):
    """Set or clear the early-access deal shown on a startup's listing."""
    try:
        startup = repository.update_deal(db, startup_id, request.early_access, request.deal_text)
    except StartupNotFoundError:
        raise _not_found(startup_id)
    except SQLAlchemyError as e:
        logger.error(f"Deal update failed for startup #{startup_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Deal update failed: {str(e)}")
    return _startup_response(startup)


# ─── Reviews ─────────────────────────────────────────────────────────────────

@router.post("/reviews", response_model=ReviewResponse, tags=["Reviews"])
def create_review(request: CreateReviewRequest, db: Session = Depends(get_db_dependency)):
    payload = request.model_dump(exclude={"startup_id"})
    try:
        review = repository.add_review(db, request.startup_id, **payload)
    except StartupNotFoundError:
        raise _not_found(request.startup_id)
    except SQLAlchemyError as e:
        logger.error(f"Adding review failed: {e}")
        raise HTTPException(status_code=500, detail=f"Review failed: {str(e)}")
    return ReviewResponse(
        id=review.id,
        startup_id=review.startup_id,
        roi=review.roi,
        scalability=review.scalability,
        security=review.security,
        integration=review.integration,
        comment=review.comment,
        created_at=review.created_at,
    )


# ─── Scoring ─────────────────────────────────────────────────────────────────

@router.get("/startups/{startup_id}/score", response_model=ScoreResponse, tags=["Scoring"])
def get_score(
    startup_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db_dependency),
    engine: ScoreEngine = Depends(get_score_engine),
    recorder: HistoryRecorder = Depends(get_history_recorder),
):
    """
    Enterprise Confidence Index, market position and insight for a startup.
    A history snapshot is written after the response is sent.
    """
    try:
        upvotes, reviews = repository.load_scoring_inputs(db, startup_id)
    except StartupNotFoundError:
        raise _not_found(startup_id)
    except SQLAlchemyError as e:
        logger.error(f"Scoring failed for startup #{startup_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Scoring failed: {str(e)}")

    result = engine.compute(reviews, upvotes)

    if result.review_count > 0:
        background_tasks.add_task(recorder.record, startup_id, result, datetime.utcnow())

    return ScoreResponse(**result.to_dict())


@router.get(
    "/startups/{startup_id}/eci-history",
    response_model=List[HistorySnapshotResponse],
    tags=["Scoring"],
)
def get_eci_history(
    startup_id: int,
    limit: int = Query(settings.HISTORY_LIMIT, ge=1, le=settings.HISTORY_LIMIT_MAX),
    db: Session = Depends(get_db_dependency),
    recorder: HistoryRecorder = Depends(get_history_recorder),
):
    """ECI snapshots for a startup, oldest first. Empty list means no history yet."""
    try:
        repository.get_startup(db, startup_id)
    except StartupNotFoundError:
        raise _not_found(startup_id)
    except SQLAlchemyError as e:
        logger.error(f"History lookup failed for startup #{startup_id}: {e}")
        raise HTTPException(status_code=500, detail=f"History failed: {str(e)}")

    try:
        snapshots = recorder.fetch_history(startup_id, limit=limit)
    except HistoryUnavailableError:
        raise HTTPException(status_code=503, detail="ECI history unavailable.")
    return [HistorySnapshotResponse(**s.to_dict()) for s in snapshots]
