"""
Quiz lifecycle service
Create, read, update and delete quiz definitions
"""

import logging
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from quizapp.core.exceptions import NotFoundException, ValidationException
from quizapp.models import Quiz
from quizapp.schemas.quiz import QuestionSchema

logger = logging.getLogger(__name__)

INVALID_QUIZ_DATA = "Invalid quiz data"


def normalize_questions(questions: Any) -> List[dict]:
    """
    Validate a question list and return it as plain JSON-ready dicts

    Raises:
        ValidationException: if the list is missing, empty or holds a malformed question
    """
    if not isinstance(questions, (list, tuple)) or len(questions) == 0:
        raise ValidationException(INVALID_QUIZ_DATA)

    normalized = []
    for position, question in enumerate(questions):
        try:
            if isinstance(question, BaseModel):
                question = question.model_dump()
            normalized.append(QuestionSchema.model_validate(question).model_dump())
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise ValidationException(
                INVALID_QUIZ_DATA, details={"question": position, "errors": errors}
            )
    return normalized


class QuizService:
    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _validate(title: Optional[str], questions: Any) -> List[dict]:
        if not title or not str(title).strip():
            raise ValidationException(INVALID_QUIZ_DATA)
        return normalize_questions(questions)

    def create_quiz(
        self,
        title: Optional[str],
        questions: Optional[Sequence[Any]],
        time_limit: Optional[int],
        creator_id: Optional[str],
    ) -> Quiz:
        """Create a quiz owned by ``creator_id``"""
        normalized = self._validate(title, questions)

        quiz = Quiz(
            title=title,
            questions=normalized,
            time_limit=time_limit,
            created_by=creator_id,
        )
        self.db.add(quiz)
        self.db.commit()
        self.db.refresh(quiz)

        logger.info(f"Quiz {quiz.id} created by {creator_id}")
        return quiz

    def get_quiz(self, quiz_id: str) -> Quiz:
        """Get quiz by ID"""
        quiz = self.db.get(Quiz, quiz_id)
        if not quiz:
            raise NotFoundException("Quiz")
        return quiz

    def list_quizzes(self) -> List[Quiz]:
        """All quizzes, newest first"""
        return self.db.query(Quiz).order_by(Quiz.created_at.desc(), Quiz.id).all()

    def get_quizzes_by_ids(self, quiz_ids) -> dict:
        ids = set(quiz_ids)
        if not ids:
            return {}
        return {quiz.id: quiz for quiz in self.db.query(Quiz).filter(Quiz.id.in_(ids)).all()}

    def update_quiz(
        self,
        quiz_id: str,
        title: Optional[str],
        questions: Optional[Sequence[Any]],
        time_limit: Optional[int],
    ) -> Quiz:
        """Replace title, questions and time limit of an existing quiz"""
        normalized = self._validate(title, questions)

        quiz = self.get_quiz(quiz_id)
        quiz.title = title
        quiz.questions = normalized
        quiz.time_limit = time_limit

        self.db.commit()
        self.db.refresh(quiz)

        logger.info(f"Quiz {quiz_id} updated")
        return quiz

    def delete_quiz(self, quiz_id: str) -> None:
        """Hard-delete a quiz; its results stay behind as orphans"""
        quiz = self.get_quiz(quiz_id)
        self.db.delete(quiz)
        self.db.commit()

        logger.info(f"Quiz {quiz_id} deleted")
