"""
Admin endpoints
"""

from fastapi import APIRouter, Depends

from quizapp.api.deps import get_termination_service
from quizapp.core.security import TokenData, require_admin
from quizapp.schemas.results import TerminationResponse
from quizapp.services import TerminationService

router = APIRouter()


@router.post("/terminate/{user_id}/{quiz_id}", response_model=TerminationResponse)
async def terminate_user_quiz(
    user_id: str,
    quiz_id: str,
    admin: TokenData = Depends(require_admin),
    termination: TerminationService = Depends(get_termination_service),
):
    """Terminate a user's quiz on an administrator's behalf (e.g. cheating detected)"""
    terminated_user_id = termination.terminate(user_id, quiz_id, admin.user_id)
    return {"message": "Quiz terminated for user", "user_id": terminated_user_id}
