"""
SQLAlchemy ORM Models
EthAum Enterprise Marketplace
"""

from sqlalchemy import (
    Column, Integer, String, Text, Boolean,
    DateTime, ForeignKey, Index
)
from sqlalchemy.orm import relationship, declarative_base
from datetime import datetime

Base = declarative_base()


class Startup(Base):
    __tablename__ = "startups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    tagline = Column(Text)
    industry = Column(String(100))
    stage = Column(String(50))
    description = Column(Text)
    upvotes = Column(Integer, nullable=False, default=0)
    early_access = Column(Boolean, nullable=False, default=False)
    deal_text = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    reviews = relationship("Review", back_populates="startup", cascade="all, delete-orphan")
    eci_history = relationship("EciHistory", back_populates="startup", cascade="all, delete-orphan")


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    startup_id = Column(Integer, ForeignKey("startups.id", ondelete="CASCADE"), nullable=False)
    roi = Column(Integer, nullable=False)
    scalability = Column(Integer, nullable=False)
    security = Column(Integer, nullable=False)
    integration = Column(Integer, nullable=False)
    comment = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)

    startup = relationship("Startup", back_populates="reviews")

    __table_args__ = (Index("ix_review_startup", "startup_id"),)


class EciHistory(Base):
    """Append-only ECI snapshots. Rows are never updated."""
    __tablename__ = "eci_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    startup_id = Column(Integer, ForeignKey("startups.id", ondelete="CASCADE"), nullable=False)
    eci = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)
    upvotes = Column(Integer, nullable=False)
    review_count = Column(Integer, nullable=False)
    recorded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    startup = relationship("Startup", back_populates="eci_history")

    __table_args__ = (
        Index("ix_eci_history_startup_recorded", "startup_id", "recorded_at"),
    )
