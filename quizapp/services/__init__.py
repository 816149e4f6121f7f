"""
Service layer

Each service is built around an explicit SQLAlchemy session and receives
the collaborators it needs through its constructor.
"""

from quizapp.services.attempts import AttemptService
from quizapp.services.leaderboard import LeaderboardService
from quizapp.services.quizzes import QuizService
from quizapp.services.termination import TerminationService
from quizapp.services.users import UserService
from quizapp.services.visibility import VisibilityService

__all__ = [
    "AttemptService",
    "LeaderboardService",
    "QuizService",
    "TerminationService",
    "UserService",
    "VisibilityService",
]
