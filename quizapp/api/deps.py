"""
Dependency providers
Services are built per request around the request's database session
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from quizapp.core.database import get_db
from quizapp.services import (
    AttemptService,
    LeaderboardService,
    QuizService,
    TerminationService,
    UserService,
    VisibilityService,
)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_quiz_service(db: Session = Depends(get_db)) -> QuizService:
    return QuizService(db)


def get_attempt_service(
    db: Session = Depends(get_db), quizzes: QuizService = Depends(get_quiz_service)
) -> AttemptService:
    return AttemptService(db, quizzes=quizzes)


def get_termination_service(
    db: Session = Depends(get_db), users: UserService = Depends(get_user_service)
) -> TerminationService:
    return TerminationService(db, users=users)


def get_visibility_service(
    db: Session = Depends(get_db),
    quizzes: QuizService = Depends(get_quiz_service),
    users: UserService = Depends(get_user_service),
) -> VisibilityService:
    return VisibilityService(db, quizzes=quizzes, users=users)


def get_leaderboard_service(
    db: Session = Depends(get_db), users: UserService = Depends(get_user_service)
) -> LeaderboardService:
    return LeaderboardService(db, users=users)
