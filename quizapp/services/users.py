"""User service"""

from typing import Dict, Iterable, Optional, Set

from sqlalchemy.orm import Session

from quizapp.models import User


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """Get user by ID, optionally locking the row until the transaction ends"""
        return self.db.get(User, user_id, with_for_update=True if for_update else None)

    def get_users_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Resolve a batch of user references in one query"""
        ids = set(user_ids)
        if not ids:
            return {}
        users = self.db.query(User).filter(User.id.in_(ids)).all()
        return {user.id: user for user in users}

    def get_legacy_terminated_quiz_ids(self, user_id: str) -> Set[str]:
        """Quiz ids held in the user's legacy terminated list (empty for unknown users)"""
        user = self.get_user(user_id)
        if not user or not user.terminated_quizzes:
            return set()
        return {str(quiz_id) for quiz_id in user.terminated_quizzes}
