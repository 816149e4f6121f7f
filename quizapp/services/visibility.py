"""
Visibility and status service

Works out which quizzes a user may still see and how their past attempts
stand. A quiz counts as terminated for a user when either the user's result
row says so or the quiz id sits in the user's legacy terminated list.
"""

from typing import Dict, List, Optional, Set

from sqlalchemy.orm import Session

from quizapp.models import Quiz, QuizResult
from quizapp.services.quizzes import QuizService
from quizapp.services.users import UserService


def resolve_terminated_quiz_ids(results: List[QuizResult], legacy_ids: Set[str]) -> Set[str]:
    """Union of result-level termination flags and the legacy list"""
    flagged = {result.quiz_id for result in results if result.terminated}
    return flagged | set(legacy_ids)


class VisibilityService:
    def __init__(
        self,
        db: Session,
        quizzes: Optional[QuizService] = None,
        users: Optional[UserService] = None,
    ):
        self.db = db
        self.quizzes = quizzes or QuizService(db)
        self.users = users or UserService(db)

    def _results_for(self, user_id: str):
        return self.db.query(QuizResult).filter(QuizResult.user_id == user_id)

    def list_visible_quizzes(self, user_id: str) -> List[Dict]:
        """All non-terminated quizzes, newest first, flagged with ``attempted``"""
        results = self._results_for(user_id).all()
        attempted_ids = {result.quiz_id for result in results}
        terminated_ids = resolve_terminated_quiz_ids(
            results, self.users.get_legacy_terminated_quiz_ids(user_id)
        )

        return [
            _quiz_document(quiz, attempted=quiz.id in attempted_ids)
            for quiz in self.quizzes.list_quizzes()
            if quiz.id not in terminated_ids
        ]

    def list_attempted_quizzes(self, user_id: str) -> List[Dict]:
        """The user's results, newest first, skipping quizzes that no longer exist"""
        results = (
            self._results_for(user_id)
            .order_by(QuizResult.completed_at.desc(), QuizResult.id)
            .all()
        )
        legacy_ids = self.users.get_legacy_terminated_quiz_ids(user_id)
        quizzes = self.quizzes.get_quizzes_by_ids(result.quiz_id for result in results)

        attempted = []
        for result in results:
            quiz = quizzes.get(result.quiz_id)
            if quiz is None:
                continue
            attempted.append(
                {
                    "quiz": {"id": quiz.id, "title": quiz.title, "questions": quiz.questions},
                    "score": result.score,
                    "completed_at": result.completed_at,
                    "terminated": bool(result.terminated) or quiz.id in legacy_ids,
                }
            )
        return attempted


def _quiz_document(quiz: Quiz, **extra) -> Dict:
    return {
        "id": quiz.id,
        "title": quiz.title,
        "questions": quiz.questions,
        "time_limit": quiz.time_limit,
        "created_by": quiz.created_by,
        "created_at": quiz.created_at,
        **extra,
    }
