"""
Persistence-layer tests: repository operations and sample data seeding.
"""

import pytest

from db import repository
from db.models import Review, Startup
from db.repository import StartupNotFoundError, normalize_review_payload
from db.seed import SAMPLE_STARTUPS, seed_marketplace
from engine.scorer import compute_score
from models.schemas import MarketPosition


@pytest.fixture
def startup(db):
    return repository.create_startup(db, name="CloudOps360", industry="DevOps", stage="Series B")


class TestRepository:
    def test_get_unknown_startup(self, db):
        with pytest.raises(StartupNotFoundError):
            repository.get_startup(db, 123)

    def test_upvote_is_incremental(self, db, startup):
        counts = [repository.upvote_startup(db, startup.id) for _ in range(3)]
        assert counts == [1, 2, 3]

    def test_upvote_unknown_startup(self, db):
        with pytest.raises(StartupNotFoundError):
            repository.upvote_startup(db, 99)

    def test_load_scoring_inputs(self, db, startup):
        repository.add_review(db, startup.id, roi=5, scalability=4, security=3, integration=2)
        repository.upvote_startup(db, startup.id)

        upvotes, reviews = repository.load_scoring_inputs(db, startup.id)
        assert upvotes == 1
        assert len(reviews) == 1
        assert (reviews[0].roi, reviews[0].scalability,
                reviews[0].security, reviews[0].integration) == (5, 4, 3, 2)

    def test_load_scoring_inputs_unknown_startup(self, db):
        with pytest.raises(StartupNotFoundError):
            repository.load_scoring_inputs(db, 7)

    def test_normalize_fills_scalability(self):
        assert normalize_review_payload({"roi": 3})["scalability"] == 4
        assert normalize_review_payload({"roi": 3, "scalability": 2})["scalability"] == 2

    def test_add_review_without_scalability(self, db, startup):
        review = repository.add_review(db, startup.id, roi=3, security=3, integration=3)
        assert review.scalability == 4

    def test_update_deal_clears_empty_text(self, db, startup):
        updated = repository.update_deal(db, startup.id, True, "")
        assert updated.early_access is True
        assert updated.deal_text is None

    def test_trending_counts_reviews(self, db, startup):
        other = repository.create_startup(db, name="PropelCX", upvotes=4)
        repository.add_review(db, startup.id, roi=4, scalability=4, security=4, integration=4)
        repository.add_review(db, startup.id, roi=4, scalability=4, security=4, integration=4)

        rows = repository.trending_startups(db, limit=5)
        assert [(s.name, count, score) for s, count, score in rows] == [
            ("CloudOps360", 2, 10),
            ("PropelCX", 0, 8),
        ]

    def test_deleting_startup_removes_reviews(self, db, startup):
        repository.add_review(db, startup.id, roi=4, scalability=4, security=4, integration=4)
        db.delete(startup)
        db.commit()
        assert db.query(Review).count() == 0


class TestSeed:
    def test_seed_loads_sample_marketplace(self, db):
        assert seed_marketplace(db) == len(SAMPLE_STARTUPS)
        assert db.query(Startup).count() == 10
        assert db.query(Review).count() == 28

    def test_seed_is_idempotent(self, db):
        seed_marketplace(db)
        assert seed_marketplace(db) == 0
        assert db.query(Startup).count() == 10

    def test_seeded_integration_ratings_in_range(self, db):
        seed_marketplace(db)
        assert {r.integration for r in db.query(Review).all()} <= {3, 4}

    def test_seeded_leaders(self, db):
        seed_marketplace(db)
        positions = {}
        for startup, _ in repository.list_startups(db):
            upvotes, reviews = repository.load_scoring_inputs(db, startup.id)
            positions[startup.name] = compute_score(reviews, upvotes).market_position
        assert positions["MedSync AI"] == MarketPosition.LEADER
        assert positions["EduScale"] == MarketPosition.LEADER
