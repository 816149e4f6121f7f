"""
Quiz endpoints
Authoring (admin), listing, attempts, termination and leaderboards
"""

from typing import List

from fastapi import APIRouter, Depends, status

from quizapp.api.deps import (
    get_attempt_service,
    get_leaderboard_service,
    get_quiz_service,
    get_termination_service,
    get_visibility_service,
)
from quizapp.core.security import TokenData, get_current_user_token, require_admin
from quizapp.schemas.base import MessageResponse
from quizapp.schemas.quiz import QuizEnvelope, QuizPayload, QuizResponse, QuizWithStatus
from quizapp.schemas.results import (
    AttemptedQuiz,
    LeaderboardResponse,
    SubmitPayload,
    SubmitResponse,
    TerminationResponse,
)
from quizapp.services import (
    AttemptService,
    LeaderboardService,
    QuizService,
    TerminationService,
    VisibilityService,
)

router = APIRouter()

# Static paths are registered before the "/{quiz_id}" patterns they would otherwise match


@router.post("/create", response_model=QuizEnvelope, status_code=status.HTTP_201_CREATED)
async def create_quiz(
    payload: QuizPayload,
    admin: TokenData = Depends(require_admin),
    quizzes: QuizService = Depends(get_quiz_service),
):
    """Create new quiz (admins only)"""
    quiz = quizzes.create_quiz(payload.title, payload.questions, payload.time_limit, admin.user_id)
    return {"message": "Quiz created successfully", "quiz": quiz}


@router.get("/all", response_model=List[QuizWithStatus])
async def get_visible_quizzes(
    current_user: TokenData = Depends(get_current_user_token),
    visibility: VisibilityService = Depends(get_visibility_service),
):
    """Quizzes the caller may take, with their attempted status"""
    return visibility.list_visible_quizzes(current_user.user_id)


@router.get("/attempted", response_model=List[AttemptedQuiz])
async def get_attempted_quizzes(
    current_user: TokenData = Depends(get_current_user_token),
    visibility: VisibilityService = Depends(get_visibility_service),
):
    """Quizzes the caller has attempted or been terminated from"""
    return visibility.list_attempted_quizzes(current_user.user_id)


@router.post("/terminate/{quiz_id}", response_model=TerminationResponse)
async def terminate_quiz(
    quiz_id: str,
    current_user: TokenData = Depends(get_current_user_token),
    termination: TerminationService = Depends(get_termination_service),
):
    """Mark a quiz as terminated for the caller"""
    user_id = termination.terminate(current_user.user_id, quiz_id, current_user.user_id)
    return {"message": "Quiz terminated for user", "user_id": user_id}


@router.get("/{quiz_id}", response_model=QuizResponse)
async def get_quiz(
    quiz_id: str,
    current_user: TokenData = Depends(get_current_user_token),
    quizzes: QuizService = Depends(get_quiz_service),
):
    """Get specific quiz by ID"""
    return quizzes.get_quiz(quiz_id)


@router.put("/{quiz_id}", response_model=QuizEnvelope)
async def update_quiz(
    quiz_id: str,
    payload: QuizPayload,
    admin: TokenData = Depends(require_admin),
    quizzes: QuizService = Depends(get_quiz_service),
):
    """Replace a quiz's title, questions and time limit"""
    quiz = quizzes.update_quiz(quiz_id, payload.title, payload.questions, payload.time_limit)
    return {"message": "Quiz updated successfully", "quiz": quiz}


@router.delete("/{quiz_id}", response_model=MessageResponse)
async def delete_quiz(
    quiz_id: str,
    admin: TokenData = Depends(require_admin),
    quizzes: QuizService = Depends(get_quiz_service),
):
    """Delete quiz (admins only)"""
    quizzes.delete_quiz(quiz_id)
    return {"message": "Quiz deleted successfully"}


@router.post("/{quiz_id}/submit", response_model=SubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_quiz(
    quiz_id: str,
    payload: SubmitPayload,
    current_user: TokenData = Depends(get_current_user_token),
    attempts: AttemptService = Depends(get_attempt_service),
):
    """Submit quiz attempt"""
    result = attempts.submit(current_user.user_id, quiz_id, payload.answers, payload.score)
    return {"message": "Quiz submitted successfully", "result": result}


@router.get("/{quiz_id}/leaderboard", response_model=LeaderboardResponse)
async def get_quiz_leaderboard(
    quiz_id: str,
    current_user: TokenData = Depends(get_current_user_token),
    leaderboard: LeaderboardService = Depends(get_leaderboard_service),
):
    """Ranked results for a quiz plus the caller's own entry"""
    return leaderboard.get_leaderboard(quiz_id, current_user.user_id)
