from quizapp.services import LeaderboardService
from tests.conftest import minutes


def test_empty_leaderboard(db, user):
    board = LeaderboardService(db).get_leaderboard("any-quiz", user.id)
    assert board == {"leaderboard": [], "user_rank": None}


def test_orders_by_score_then_completion_time(db, make_user, make_quiz, make_result):
    quiz = make_quiz()
    early = make_user("Early")
    late = make_user("Late")
    best = make_user("Best")
    make_result(late.id, quiz.id, score=10, completed_at=minutes(2))
    make_result(early.id, quiz.id, score=10, completed_at=minutes(1))
    make_result(best.id, quiz.id, score=12, completed_at=minutes(3))

    board = LeaderboardService(db).get_leaderboard(quiz.id, late.id)

    assert [(e["name"], e["rank"]) for e in board["leaderboard"]] == [
        ("Best", 1),
        ("Early", 2),
        ("Late", 3),
    ]
    assert board["user_rank"]["rank"] == 3
    assert board["user_rank"]["user_id"] == late.id


def test_ranks_are_distinct_positions(db, make_user, make_quiz, make_result):
    quiz = make_quiz()
    for offset, score in enumerate([5, 5, 5, 8, 1]):
        player = make_user(f"Player{offset}")
        make_result(player.id, quiz.id, score=score, completed_at=minutes(offset))

    entries = LeaderboardService(db).get_leaderboard(quiz.id, "observer")["leaderboard"]

    assert [e["rank"] for e in entries] == [1, 2, 3, 4, 5]
    scores = [e["score"] for e in entries]
    assert scores == sorted(scores, reverse=True)


def test_requesting_user_without_result_has_no_rank(db, user, make_user, make_quiz, make_result):
    quiz = make_quiz()
    other = make_user("Other")
    make_result(other.id, quiz.id, score=3)

    board = LeaderboardService(db).get_leaderboard(quiz.id, user.id)

    assert len(board["leaderboard"]) == 1
    assert board["user_rank"] is None


def test_display_name_falls_back_to_email_then_placeholder(db, make_user, make_quiz, make_result):
    quiz = make_quiz()
    mailed = make_user(name=None, email="mail@example.com")
    make_result(mailed.id, quiz.id, score=2, completed_at=minutes(1))
    make_result("unknown-user", quiz.id, score=1, completed_at=minutes(2))

    entries = LeaderboardService(db).get_leaderboard(quiz.id, mailed.id)["leaderboard"]

    assert [(e["name"], e["email"]) for e in entries] == [
        ("mail@example.com", "mail@example.com"),
        ("User", ""),
    ]


def test_user_rank_is_best_entry_when_user_has_several(db, user, make_quiz, make_result):
    quiz = make_quiz()
    make_result(user.id, quiz.id, score=2, completed_at=minutes(1))
    make_result(user.id, quiz.id, score=9, completed_at=minutes(2))

    board = LeaderboardService(db).get_leaderboard(quiz.id, user.id)

    assert board["user_rank"]["score"] == 9
    assert board["user_rank"]["rank"] == 1
