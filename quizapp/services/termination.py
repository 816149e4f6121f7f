"""
Termination service

A terminated quiz is recorded in two places: the ``terminated`` flag of the
user's QuizResult and the legacy ``User.terminated_quizzes`` list. Both are
written here, in one transaction, and readers take the union of the two.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from quizapp.core.exceptions import NotFoundException
from quizapp.models import QuizResult, utcnow
from quizapp.services.users import UserService

logger = logging.getLogger(__name__)


class TerminationService:
    def __init__(self, db: Session, users: Optional[UserService] = None):
        self.db = db
        self.users = users or UserService(db)

    def terminate(self, user_id: str, quiz_id: str, initiator_id: str) -> str:
        """
        Mark ``quiz_id`` as terminated for ``user_id``

        Idempotent. A prior submission keeps its answers and score; when the
        user never submitted, an empty zero-score result is created so the
        quiz stays hidden from them.

        Returns:
            The terminated user's id
        """
        # Locked so concurrent terminations cannot overwrite each other's legacy entries
        user = self.users.get_user(user_id, for_update=True)
        if not user:
            raise NotFoundException("User")

        try:
            legacy = [str(item) for item in (user.terminated_quizzes or [])]
            if quiz_id not in legacy:
                # reassign so the JSON column is flagged dirty
                user.terminated_quizzes = legacy + [quiz_id]

            now = utcnow()
            result = (
                self.db.query(QuizResult)
                .filter(QuizResult.user_id == user_id, QuizResult.quiz_id == quiz_id)
                .order_by(QuizResult.completed_at, QuizResult.id)
                .first()
            )
            if result:
                result.terminated = True
                result.terminated_at = now
                result.terminated_by = initiator_id
            else:
                self.db.add(
                    QuizResult(
                        user_id=user_id,
                        quiz_id=quiz_id,
                        answers=[],
                        score=0,
                        completed_at=now,
                        terminated=True,
                        terminated_at=now,
                        terminated_by=initiator_id,
                    )
                )

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Quiz {quiz_id} terminated for user {user_id}",
            extra={"initiator_id": initiator_id, "self_terminated": initiator_id == user_id},
        )
        return user.id
