from quizapp.services import TerminationService, VisibilityService
from tests.conftest import minutes


def test_visible_quizzes_are_newest_first_with_attempted_flag(db, user, make_quiz, make_result):
    old = make_quiz("Old", created_at=minutes(0))
    new = make_quiz("New", created_at=minutes(5))
    make_result(user.id, old.id, score=3)

    visible = VisibilityService(db).list_visible_quizzes(user.id)

    assert [(q["title"], q["attempted"]) for q in visible] == [("New", False), ("Old", True)]


def test_visible_quizzes_exclude_flagged_results(db, user, make_quiz, make_result):
    kept = make_quiz("Kept")
    hidden = make_quiz("Hidden")
    make_result(user.id, hidden.id, terminated=True)

    visible = VisibilityService(db).list_visible_quizzes(user.id)

    assert [q["id"] for q in visible] == [kept.id]


def test_visible_quizzes_exclude_legacy_terminated(db, make_user, make_quiz):
    kept = make_quiz("Kept")
    hidden = make_quiz("Hidden")
    user = make_user("Carol", terminated_quizzes=[hidden.id])

    visible = VisibilityService(db).list_visible_quizzes(user.id)

    assert [q["id"] for q in visible] == [kept.id]


def test_visible_quizzes_for_user_without_record(db, make_quiz):
    quiz = make_quiz()
    visible = VisibilityService(db).list_visible_quizzes("no-such-user")
    assert [(q["id"], q["attempted"]) for q in visible] == [(quiz.id, False)]


def test_termination_hides_quiz_from_other_users_only(db, make_user, make_quiz):
    quiz = make_quiz()
    alice = make_user("Alice")
    bob = make_user("Bob")

    TerminationService(db).terminate(alice.id, quiz.id, alice.id)

    service = VisibilityService(db)
    assert service.list_visible_quizzes(alice.id) == []
    assert [q["id"] for q in service.list_visible_quizzes(bob.id)] == [quiz.id]


def test_attempted_quizzes_newest_first(db, user, make_quiz, make_result):
    first = make_quiz("First")
    second = make_quiz("Second")
    make_result(user.id, first.id, score=2, completed_at=minutes(1))
    make_result(user.id, second.id, score=7, completed_at=minutes(2))

    attempted = VisibilityService(db).list_attempted_quizzes(user.id)

    assert [(a["quiz"]["title"], a["score"], a["terminated"]) for a in attempted] == [
        ("Second", 7, False),
        ("First", 2, False),
    ]
    assert set(attempted[0]["quiz"]) == {"id", "title", "questions"}


def test_attempted_quizzes_drop_orphaned_results(db, user, make_result, make_quiz):
    quiz = make_quiz()
    make_result(user.id, quiz.id, score=5)
    make_result(user.id, "deleted-quiz", score=9)

    attempted = VisibilityService(db).list_attempted_quizzes(user.id)

    assert [a["quiz"]["id"] for a in attempted] == [quiz.id]


def test_attempted_quizzes_resolve_terminated_from_legacy_list(db, make_user, make_quiz, make_result):
    quiz = make_quiz()
    user = make_user("Dave", terminated_quizzes=[quiz.id])
    make_result(user.id, quiz.id, score=6, terminated=False)

    [attempt] = VisibilityService(db).list_attempted_quizzes(user.id)

    assert attempt["terminated"] is True
    assert attempt["score"] == 6


def test_attempted_quizzes_resolve_terminated_from_result_flag(db, user, make_quiz, make_result):
    quiz = make_quiz()
    make_result(user.id, quiz.id, terminated=True)

    [attempt] = VisibilityService(db).list_attempted_quizzes(user.id)

    assert attempt["terminated"] is True
