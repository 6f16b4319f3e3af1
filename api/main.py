"""
FastAPI Application Entry Point
EthAum Enterprise Marketplace
"""

import logging
import sys
import os
from contextlib import asynccontextmanager
from typing import Callable, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from api.routes import router
from config.settings import settings
from db.database import init_db, get_db
from db.seed import seed_marketplace

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def bootstrap_database(
    bind=None,
    session_factory: Optional[Callable[[], Session]] = None,
) -> int:
    """Create tables and, when SEED_ON_STARTUP is set, load the sample marketplace."""
    init_db(bind)
    if not settings.SEED_ON_STARTUP:
        return 0
    with get_db(session_factory) as db:
        inserted = seed_marketplace(db)
    logger.info(f"🌱 Seeded {inserted} sample startups")
    return inserted


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"   Database:  {settings.DATABASE_URL}")
    logger.info(
        f"   Quadrant:  ECI >= {settings.LEADER_CONFIDENCE_THRESHOLD:g}, "
        f"upvotes >= {settings.LEADER_UPVOTE_THRESHOLD}"
    )
    bootstrap_database()
    yield
    logger.info("Shutting down EthAum Marketplace API")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Enterprise SaaS marketplace backend. Lists startups, collects enterprise "
        "reviews and upvotes, and scores each startup with the Enterprise "
        "Confidence Index (ECI) and its market-position quadrant."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix=API_PREFIX)


@app.get("/", tags=["System"])
async def root():
    """Service info and the main marketplace endpoints."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "status": "running",
        "endpoints": {
            "startups": f"GET|POST {API_PREFIX}/startups",
            "trending": f"GET {API_PREFIX}/startups/trending",
            "reviews": f"POST {API_PREFIX}/reviews",
            "score": f"GET {API_PREFIX}/startups/{{id}}/score",
            "history": f"GET {API_PREFIX}/startups/{{id}}/eci-history",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
