"""
ECI history recorder tests.
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.repository import create_startup
from engine.history import HistoryRecorder, HistoryUnavailableError
from engine.scorer import compute_score
from models.schemas import ReviewRatings


T0 = datetime(2026, 1, 1, 9, 0, 0)


@pytest.fixture
def startup(db):
    return create_startup(db, name="DataSift AI", industry="Data & Analytics")


@pytest.fixture
def scored():
    reviews = [ReviewRatings(5, 5, 4, 4), ReviewRatings(4, 5, 5, 3)]
    return compute_score(reviews, 7)


@pytest.fixture
def broken_recorder():
    """A recorder whose store has no tables, so every statement fails."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield HistoryRecorder(session_factory=sessionmaker(bind=engine))
    engine.dispose()


class TestRecord:
    def test_round_trip(self, recorder, startup, scored):
        written = recorder.record(startup.id, scored, T0)
        history = recorder.fetch_history(startup.id)

        assert len(history) == 1
        snap = history[0]
        assert snap == written
        assert snap.eci == scored.rounded_confidence
        assert snap.base_score == scored.rounded_score
        assert snap.upvotes == 7
        assert snap.review_count == 2
        assert snap.recorded_at == T0

    def test_no_reviews_not_recorded(self, recorder, startup):
        assert recorder.record(startup.id, compute_score([], 4), T0) is None
        assert recorder.fetch_history(startup.id) == []

    def test_write_failure_is_swallowed(self, broken_recorder, scored):
        assert broken_recorder.record(1, scored, T0) is None

    def test_default_timestamp(self, recorder, startup, scored):
        before = datetime.utcnow()
        snap = recorder.record(startup.id, scored)
        assert snap.recorded_at >= before


class TestFetchHistory:
    def test_empty_history(self, recorder, startup):
        assert recorder.fetch_history(startup.id) == []

    def test_ascending_regardless_of_insertion_order(self, recorder, startup, scored):
        offsets = [5, 1, 9, 3, 7]
        for minutes in offsets:
            recorder.record(startup.id, scored, T0 + timedelta(minutes=minutes))

        history = recorder.fetch_history(startup.id)
        stamps = [s.recorded_at for s in history]
        assert stamps == sorted(stamps)
        assert len(history) == len(offsets)

    def test_limit_keeps_most_recent_window(self, recorder, startup, scored):
        for minutes in range(30):
            recorder.record(startup.id, scored, T0 + timedelta(minutes=minutes))

        history = recorder.fetch_history(startup.id, limit=5)
        assert [s.recorded_at for s in history] == [
            T0 + timedelta(minutes=m) for m in range(25, 30)
        ]

    def test_default_limit_is_twenty(self, recorder, startup, scored):
        for minutes in range(25):
            recorder.record(startup.id, scored, T0 + timedelta(minutes=minutes))
        assert len(recorder.fetch_history(startup.id)) == 20

    def test_zero_limit(self, recorder, startup, scored):
        recorder.record(startup.id, scored, T0)
        assert recorder.fetch_history(startup.id, limit=0) == []

    def test_isolated_per_startup(self, db, recorder, startup, scored):
        other = create_startup(db, name="FlowHR")
        recorder.record(startup.id, scored, T0)
        recorder.record(other.id, compute_score([ReviewRatings(2, 2, 2, 2)], 0), T0)

        mine = recorder.fetch_history(startup.id)
        assert len(mine) == 1
        assert mine[0].entity_id == startup.id

    def test_read_failure_raises_unavailable(self, broken_recorder):
        with pytest.raises(HistoryUnavailableError):
            broken_recorder.fetch_history(1)
