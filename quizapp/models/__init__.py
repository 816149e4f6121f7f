"""
QuizApp Models Package
"""

from quizapp.models.quiz import Quiz, QuizResult, new_id, utcnow
from quizapp.models.user import User

__all__ = ["User", "Quiz", "QuizResult", "new_id", "utcnow"]
