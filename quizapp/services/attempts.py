"""Attempt recording service"""

import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from quizapp.models import QuizResult, utcnow
from quizapp.services.quizzes import QuizService

logger = logging.getLogger(__name__)


class AttemptService:
    def __init__(self, db: Session, quizzes: Optional[QuizService] = None):
        self.db = db
        self.quizzes = quizzes or QuizService(db)

    def submit(self, user_id: str, quiz_id: str, answers: List[Any], score: float) -> QuizResult:
        """
        Record a submitted attempt

        The score is stored as supplied by the client; it is not re-graded
        against the quiz's answer key.
        """
        self.quizzes.get_quiz(quiz_id)

        result = QuizResult(
            user_id=user_id,
            quiz_id=quiz_id,
            answers=list(answers or []),
            score=score,
            completed_at=utcnow(),
            terminated=False,
        )
        self.db.add(result)
        self.db.commit()
        self.db.refresh(result)

        logger.info(f"User {user_id} submitted quiz {quiz_id} with score {score}")
        return result
