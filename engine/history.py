"""
ECI History Recorder
--------------------
Append-only time series of ECI snapshots per startup.

  record()         best-effort write; storage errors are logged, never raised
  fetch_history()  most recent `limit` snapshots, returned oldest → newest

A failed read raises HistoryUnavailableError so callers can tell
"history unavailable" apart from "no history yet" (an empty list).
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import settings
from db.database import SessionLocal, get_db
from db.models import EciHistory
from models.schemas import HistorySnapshot, ScoreResult

logger = logging.getLogger(__name__)


class HistoryUnavailableError(RuntimeError):
    """The history store could not be read."""


class HistoryRecorder:
    """
    Writes and reads ECI snapshots through its own sessions, so a write
    scheduled after a request has finished never shares the request's
    session.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self.session_factory = session_factory or SessionLocal

    def record(
        self,
        entity_id: int,
        result: ScoreResult,
        at: Optional[datetime] = None,
    ) -> Optional[HistorySnapshot]:
        """Append a snapshot for a scored startup. Returns None when skipped or failed."""
        if result.review_count == 0:
            logger.debug(f"Startup #{entity_id} has no reviews — history not recorded")
            return None

        snapshot = HistorySnapshot.from_result(entity_id, result, at)
        try:
            with get_db(self.session_factory) as db:
                db.add(EciHistory(
                    startup_id=snapshot.entity_id,
                    eci=snapshot.eci,
                    score=snapshot.base_score,
                    upvotes=snapshot.upvotes,
                    review_count=snapshot.review_count,
                    recorded_at=snapshot.recorded_at,
                ))
        except SQLAlchemyError as e:
            logger.warning(f"ECI history write failed for startup #{entity_id}: {e}")
            return None

        logger.debug(f"Recorded ECI {snapshot.eci} for startup #{entity_id}")
        return snapshot

    def fetch_history(self, entity_id: int, limit: Optional[int] = None) -> List[HistorySnapshot]:
        limit = settings.HISTORY_LIMIT if limit is None else limit
        if limit <= 0:
            return []

        try:
            with get_db(self.session_factory) as db:
                rows = (
                    db.query(EciHistory)
                    .filter(EciHistory.startup_id == entity_id)
                    .order_by(EciHistory.recorded_at.desc(), EciHistory.id.desc())
                    .limit(limit)
                    .all()
                )
                snapshots = [
                    HistorySnapshot(
                        entity_id=row.startup_id,
                        eci=row.eci,
                        base_score=row.score,
                        upvotes=row.upvotes,
                        review_count=row.review_count,
                        recorded_at=row.recorded_at,
                    )
                    for row in rows
                ]
        except SQLAlchemyError as e:
            logger.error(f"ECI history read failed for startup #{entity_id}: {e}")
            raise HistoryUnavailableError(str(e)) from e

        snapshots.reverse()
        return snapshots
