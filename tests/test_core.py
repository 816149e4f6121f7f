import json
import logging
from datetime import timedelta

import pytest

from quizapp.core.config import Settings
from quizapp.core.logging import JSONFormatter
from quizapp.core.exceptions import AuthenticationException
from quizapp.core.security import create_access_token, decode_token


def test_postgres_urls_are_normalized():
    settings = Settings(DATABASE_URL="postgres://user:pw@db:5432/quiz")
    assert settings.get_database_url() == "postgresql://user:pw@db:5432/quiz"


def test_default_database_is_local_sqlite():
    assert Settings(DATABASE_URL=None).get_database_url().startswith("sqlite:///")


def test_cors_is_open_outside_production():
    assert Settings(ENVIRONMENT="development").get_cors_origins() == ["*"]
    production = Settings(ENVIRONMENT="production", BACKEND_CORS_ORIGINS="https://a.io, https://b.io")
    assert production.get_cors_origins() == ["https://a.io", "https://b.io"]


def test_token_round_trip_keeps_claims():
    token = create_access_token({"sub": "u1", "role": "admin"})
    payload = decode_token(token)
    assert payload["sub"] == "u1"
    assert payload["role"] == "admin"


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "u1"}, expires_delta=timedelta(minutes=-1))
    with pytest.raises(AuthenticationException):
        decode_token(token)


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {"name": "quizapp.test", "levelname": "INFO", "msg": "hello %s", "args": ("world",)}
    )
    record.request_id = "r-1"

    data = json.loads(JSONFormatter().format(record))

    assert data["message"] == "hello world"
    assert data["request_id"] == "r-1"
    assert data["logger"] == "quizapp.test"
