"""
User model (the part of the user record quizzes care about)
"""

from sqlalchemy import JSON, Column, DateTime, String

from quizapp.core.database import Base
from quizapp.models.quiz import new_id, utcnow


class User(Base):
    """User model"""
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=True)
    role = Column(String(20), nullable=False, default="user")

    # Legacy store of terminated quiz ids, kept alongside QuizResult.terminated
    terminated_quizzes = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), default=utcnow)
