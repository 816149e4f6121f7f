"""
Quiz and quiz result models

Questions, answers and other nested data are stored as JSON documents.
References between tables are plain id columns without database foreign keys:
deleting a quiz leaves its results behind and readers drop them.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Index, Integer, String

from quizapp.core.database import Base


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Quiz(Base):
    """Quiz model"""
    __tablename__ = "quizzes"

    id = Column(String, primary_key=True, default=new_id)
    title = Column(String, nullable=False, index=True)
    questions = Column(JSON, nullable=False, default=list)
    time_limit = Column(Integer, nullable=True)  # in seconds

    created_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class QuizResult(Base):
    """One user's attempt at, or termination from, one quiz"""
    __tablename__ = "quiz_results"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, nullable=False, index=True)
    quiz_id = Column(String, nullable=False, index=True)

    answers = Column(JSON, nullable=False, default=list)
    score = Column(Float, nullable=False, default=0)
    completed_at = Column(DateTime(timezone=True), default=utcnow)

    terminated = Column(Boolean, nullable=False, default=False)
    terminated_at = Column(DateTime(timezone=True), nullable=True)
    terminated_by = Column(String, nullable=True)

    __table_args__ = (Index("ix_quiz_results_user_quiz", "user_id", "quiz_id"),)
