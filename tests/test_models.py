import pytest

from quizapp.models import Quiz, QuizResult, User


@pytest.mark.parametrize(
    "column",
    [
        Quiz.__table__.c.id,
        Quiz.__table__.c.title,
        Quiz.__table__.c.created_by,
        QuizResult.__table__.c.id,
        QuizResult.__table__.c.user_id,
        QuizResult.__table__.c.quiz_id,
        QuizResult.__table__.c.terminated_by,
        User.__table__.c.id,
    ],
    ids=lambda column: f"{column.table.name}.{column.name}",
)
def test_reference_columns_are_unbounded(column):
    # ids come from outside (token subjects, path parameters); no length cap
    assert column.type.length is None
