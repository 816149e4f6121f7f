"""
Leaderboard service

Ranks every result for a quiz by score (highest first), breaking ties by
completion time (earliest first). Rank is the 1-based position in that order,
so equal scores never share a rank.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from quizapp.models import QuizResult, User
from quizapp.services.users import UserService

DEFAULT_DISPLAY_NAME = "User"


def display_name(user: Optional[User]) -> str:
    if user is None:
        return DEFAULT_DISPLAY_NAME
    return user.name or user.email or DEFAULT_DISPLAY_NAME


class LeaderboardService:
    def __init__(self, db: Session, users: Optional[UserService] = None):
        self.db = db
        self.users = users or UserService(db)

    def get_leaderboard(self, quiz_id: str, requesting_user_id: str) -> Dict:
        """
        Get quiz leaderboard

        Returns:
            ``{"leaderboard": [...], "user_rank": entry or None}``; an empty
            board when nobody has a result for the quiz
        """
        results: List[QuizResult] = (
            self.db.query(QuizResult)
            .filter(QuizResult.quiz_id == quiz_id)
            .order_by(QuizResult.score.desc(), QuizResult.completed_at.asc(), QuizResult.id.asc())
            .all()
        )
        if not results:
            return {"leaderboard": [], "user_rank": None}

        users = self.users.get_users_by_ids(result.user_id for result in results)

        leaderboard = []
        user_rank = None
        for rank, result in enumerate(results, start=1):
            user = users.get(result.user_id)
            entry = {
                "rank": rank,
                "user_id": result.user_id,
                "name": display_name(user),
                "email": (user.email if user else None) or "",
                "score": result.score,
            }
            leaderboard.append(entry)
            if user_rank is None and result.user_id == requesting_user_id:
                user_rank = entry

        return {"leaderboard": leaderboard, "user_rank": user_rank}
