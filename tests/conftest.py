import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "testing"

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from quizapp import models  # noqa: F401
from quizapp.core.database import Base, SessionLocal, engine
from quizapp.core.security import create_access_token
from quizapp.main import app
from quizapp.models import Quiz, QuizResult, User

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def math_questions():
    return [
        {"question": "1 + 1", "options": ["1", "2", "3"], "correct_answer": 1},
        {"question": "Even numbers", "options": ["2", "3", "4"], "correct_answer": [0, 2]},
    ]


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make(name="Alice", email=None, role="user", terminated_quizzes=None, user_id=None):
        user = User(
            name=name,
            email=email if email is not None else f"{(name or 'anon').lower()}@example.com",
            role=role,
            terminated_quizzes=terminated_quizzes or [],
        )
        if user_id is not None:
            user.id = user_id
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def make_quiz(db):
    def _make(title="Math", created_at=None):
        quiz = Quiz(title=title, questions=math_questions(), time_limit=60, created_at=created_at or T0)
        db.add(quiz)
        db.commit()
        return quiz

    return _make


@pytest.fixture
def make_result(db):
    def _make(user_id, quiz_id, score=0, completed_at=None, terminated=False):
        result = QuizResult(
            user_id=user_id,
            quiz_id=quiz_id,
            answers=[],
            score=score,
            completed_at=completed_at or T0,
            terminated=terminated,
        )
        db.add(result)
        db.commit()
        return result

    return _make


def auth_headers(user):
    token = create_access_token({"sub": user.id, "role": user.role, "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(make_user):
    return make_user("Alice")


@pytest.fixture
def admin(make_user):
    return make_user("Admin", role="admin")


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


def minutes(n):
    return T0 + timedelta(minutes=n)
