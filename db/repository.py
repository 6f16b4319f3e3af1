"""
Marketplace persistence operations.

All queries for startups and reviews live here so route handlers and the
CLI runner never touch the ORM directly. Upvotes are only ever changed by a
single atomic UPDATE; nothing in the application reads, increments and
writes back the counter.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from config.settings import settings
from db.models import Startup, Review
from models.schemas import RATING_DIMENSIONS, ReviewRatings

logger = logging.getLogger(__name__)


class StartupNotFoundError(LookupError):
    def __init__(self, startup_id: int):
        super().__init__(f"Startup {startup_id} not found")
        self.startup_id = startup_id


# ─── Startups ────────────────────────────────────────────────────────────────


def create_startup(
    db: Session,
    name: str,
    tagline: Optional[str] = None,
    industry: Optional[str] = None,
    stage: Optional[str] = None,
    description: Optional[str] = None,
    early_access: bool = False,
    deal_text: Optional[str] = None,
    upvotes: int = 0,
) -> Startup:
    startup = Startup(
        name=name,
        tagline=tagline,
        industry=industry,
        stage=stage,
        description=description,
        early_access=bool(early_access),
        deal_text=deal_text or None,
        upvotes=upvotes,
    )
    db.add(startup)
    db.commit()
    db.refresh(startup)
    logger.info(f"Created startup #{startup.id} '{startup.name}'")
    return startup


def get_startup(db: Session, startup_id: int) -> Startup:
    startup = db.get(Startup, startup_id)
    if startup is None:
        raise StartupNotFoundError(startup_id)
    return startup


def list_startups(db: Session) -> List[Tuple[Startup, int]]:
    """All startups with their review counts, most upvoted first."""
    review_count = func.count(Review.id).label("review_count")
    return (
        db.query(Startup, review_count)
        .outerjoin(Review, Review.startup_id == Startup.id)
        .group_by(Startup.id)
        .order_by(Startup.upvotes.desc(), Startup.created_at.desc(), Startup.id.desc())
        .all()
    )


def trending_startups(
    db: Session, limit: int = settings.TRENDING_LIMIT
) -> List[Tuple[Startup, int, int]]:
    """Top startups by trending score (upvotes * 2 + reviews * 5)."""
    review_count = func.count(Review.id)
    trending = (
        Startup.upvotes * settings.TRENDING_UPVOTE_WEIGHT
        + review_count * settings.TRENDING_REVIEW_WEIGHT
    ).label("trending_score")
    return (
        db.query(Startup, review_count.label("review_count"), trending)
        .outerjoin(Review, Review.startup_id == Startup.id)
        .group_by(Startup.id)
        .order_by(trending.desc(), Startup.id.asc())
        .limit(limit)
        .all()
    )


def upvote_startup(db: Session, startup_id: int) -> int:
    """Atomically increment upvotes and return the new count."""
    updated = (
        db.query(Startup)
        .filter(Startup.id == startup_id)
        .update({Startup.upvotes: Startup.upvotes + 1}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        raise StartupNotFoundError(startup_id)
    db.commit()
    return db.query(Startup.upvotes).filter(Startup.id == startup_id).scalar()


def update_deal(
    db: Session, startup_id: int, early_access: bool, deal_text: Optional[str]
) -> Startup:
    startup = get_startup(db, startup_id)
    startup.early_access = bool(early_access)
    startup.deal_text = deal_text or None
    db.commit()
    db.refresh(startup)
    return startup


# ─── Reviews ─────────────────────────────────────────────────────────────────


def normalize_review_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Ingestion-side cleaning applied before a review is stored.
    A missing scalability rating is filled with DEFAULT_SCALABILITY.
    """
    cleaned = dict(payload)
    if cleaned.get("scalability") is None:
        cleaned["scalability"] = settings.DEFAULT_SCALABILITY
    return cleaned


def add_review(db: Session, startup_id: int, **ratings: Any) -> Review:
    get_startup(db, startup_id)
    cleaned = normalize_review_payload(ratings)
    review = Review(
        startup_id=startup_id,
        comment=cleaned.get("comment"),
        **{d: int(cleaned[d]) for d in RATING_DIMENSIONS},
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def load_scoring_inputs(db: Session, startup_id: int) -> Tuple[int, List[ReviewRatings]]:
    """Current upvote count and every review of a startup, as scoring inputs."""
    upvotes = db.query(Startup.upvotes).filter(Startup.id == startup_id).scalar()
    if upvotes is None:
        if db.get(Startup, startup_id) is None:
            raise StartupNotFoundError(startup_id)
        upvotes = 0

    rows = db.query(Review).filter(Review.startup_id == startup_id).all()
    reviews = [
        ReviewRatings(
            roi=r.roi,
            scalability=r.scalability,
            security=r.security,
            integration=r.integration,
            comment=r.comment,
        )
        for r in rows
    ]
    return upvotes, reviews
