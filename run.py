#!/usr/bin/env python3
"""
Quick CLI runner for the EthAum Enterprise Marketplace.

Usage:
    python run.py                    # Demo: seed sample data and print ECI report
    python run.py --mode api         # Start FastAPI server
    python run.py --mode seed        # Load sample startups and reviews
    python run.py --mode init        # Create database tables only
"""

import sys
import os
import argparse
import logging
from datetime import datetime

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.settings import settings

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("run")


def init():
    from db.database import init_db
    init_db()


def seed():
    from db.database import init_db, get_db
    from db.seed import seed_marketplace

    init_db()
    with get_db() as db:
        inserted = seed_marketplace(db)
    logger.info(f"🌱 Seeding complete — {inserted} startups loaded.")


def demo():
    """Score every startup in the marketplace and print a quadrant report."""
    from db.database import get_db
    from db import repository
    from engine import ScoreEngine, HistoryRecorder

    seed()

    engine = ScoreEngine()
    recorder = HistoryRecorder()

    print("\n" + "="*70)
    print("  🏢 ETHAUM ENTERPRISE MARKETPLACE — ECI REPORT")
    print("="*70 + "\n")

    scored = []
    with get_db() as db:
        for startup, _ in repository.list_startups(db):
            upvotes, reviews = repository.load_scoring_inputs(db, startup.id)
            result = engine.compute(reviews, upvotes)
            recorder.record(startup.id, result, datetime.utcnow())
            scored.append((startup.name, startup.industry, result))

    scored.sort(key=lambda item: item[2].trending_score, reverse=True)

    print(f"  {'Startup':<18} {'Industry':<18} {'ECI':>4} {'Base':>5} {'Votes':>6} {'Trend':>6}  Position")
    print("  " + "─"*66)
    for name, industry, result in scored:
        print(
            f"  {name:<18} {(industry or '-'):<18} "
            f"{result.rounded_confidence:>4} {result.rounded_score:>5} "
            f"{result.adoption_momentum:>6} {result.trending_score:>6}  "
            f"{result.quadrant_emoji} {result.market_position.value}"
        )

    print("\n" + "─"*70)
    print("  📋 QUADRANT SUMMARY")
    print("─"*70)
    counts = {}
    for _, _, result in scored:
        counts[result.market_position] = counts.get(result.market_position, 0) + 1
    for position, count in counts.items():
        print(f"  {position.symbol} {position.value:<12} {count}")

    print("\n" + "="*70)
    print(f"  ✅ {len(scored)} startups scored")
    print(f"  🔌 Start API: python run.py --mode api  (port {settings.API_PORT})")
    print("="*70 + "\n")


def start_api():
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=settings.APP_NAME)
    parser.add_argument(
        "--mode",
        choices=["demo", "api", "seed", "init"],
        default="demo",
        help="Run mode: demo | api | seed | init",
    )
    args = parser.parse_args()

    if args.mode == "demo":
        demo()
    elif args.mode == "api":
        start_api()
    elif args.mode == "seed":
        seed()
    elif args.mode == "init":
        init()
