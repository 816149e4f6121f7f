"""
Quiz schemas
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import Field, model_validator

from quizapp.schemas.base import CamelModel


class QuestionSchema(CamelModel):
    """A single question; ``correct_answer`` holds one option index or several"""
    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=2)
    correct_answer: Union[int, List[int]]
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def check_answer_indices(self):
        indices = self.correct_answer if isinstance(self.correct_answer, list) else [self.correct_answer]
        if not indices:
            raise ValueError("at least one correct answer is required")
        for index in indices:
            if not 0 <= index < len(self.options):
                raise ValueError(f"correct answer index {index} is out of range")
        return self


class QuizPayload(CamelModel):
    """
    Body of quiz create/update requests

    Title and questions are left loose here; QuizService checks them and
    reports anything missing or malformed as invalid quiz data.
    """
    title: Optional[str] = None
    questions: Optional[Any] = None
    time_limit: Optional[int] = Field(default=None, ge=1)


class QuizResponse(CamelModel):
    id: str
    title: str
    questions: List[QuestionSchema]
    time_limit: Optional[int] = None
    created_by: Optional[str] = None
    created_at: datetime


class QuizWithStatus(QuizResponse):
    attempted: bool


class QuizSummary(CamelModel):
    id: str
    title: str
    questions: List[QuestionSchema]


class QuizEnvelope(CamelModel):
    message: str
    quiz: QuizResponse
