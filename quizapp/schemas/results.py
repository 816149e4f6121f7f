"""Quiz result, termination and leaderboard schemas"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from quizapp.schemas.base import CamelModel
from quizapp.schemas.quiz import QuizSummary


class SubmitPayload(CamelModel):
    answers: List[Any] = Field(default_factory=list)
    score: float


class QuizResultResponse(CamelModel):
    id: str
    user_id: str
    quiz_id: str
    answers: List[Any]
    score: float
    completed_at: datetime
    terminated: bool
    terminated_at: Optional[datetime] = None
    terminated_by: Optional[str] = None


class SubmitResponse(CamelModel):
    message: str
    result: QuizResultResponse


class AttemptedQuiz(CamelModel):
    quiz: QuizSummary
    score: float
    completed_at: datetime
    terminated: bool


class TerminationResponse(CamelModel):
    message: str
    user_id: str


class LeaderboardEntry(CamelModel):
    rank: int
    user_id: str
    name: str
    email: str
    score: float


class LeaderboardResponse(CamelModel):
    leaderboard: List[LeaderboardEntry]
    user_rank: Optional[LeaderboardEntry] = None
