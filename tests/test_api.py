"""Tests for the Flask HTTP surface."""

import logging

import pytest

from quiz_engine import new_quiz
from quiz_engine.api import create_app
from quiz_engine.logging import BASE_LOGGER_NAME


@pytest.fixture
def client():
    app = create_app()
    app.testing = True
    with app.test_client() as c:
        yield c
    base = logging.getLogger(BASE_LOGGER_NAME)
    for h in [h for h in base.handlers if getattr(h, "_quiz_engine_console", False)]:
        base.removeHandler(h)


def test_question_types(client) -> None:
    r = client.get("/question-types")
    assert r.status_code == 200
    assert len(r.get_json()) == 8


def test_default_question(client) -> None:
    r = client.get("/questions/defaults/checkbox")
    assert r.status_code == 200
    body = r.get_json()
    assert body["type"] == "CHECKBOX"
    assert len(body["options"]) == 3
    assert "correctAnswers" in body


def test_default_unknown_type(client) -> None:
    r = client.get("/questions/defaults/poll")
    assert r.status_code == 404
    assert "Unknown question type" in r.get_json()["error"]


def test_validate_question(client, mcq) -> None:
    r = client.post("/questions/validate", json=mcq.to_json_dict())
    assert r.get_json() == {"valid": True, "errors": []}

    broken = {**mcq.to_json_dict(), "prompt": ""}
    r = client.post("/questions/validate", json=broken)
    assert r.get_json()["errors"] == ["Question prompt is required"]


def test_bad_payload_is_400(client) -> None:
    r = client.post("/questions/validate", json={"type": "POLL"})
    assert r.status_code == 400
    body = r.get_json()
    assert body["error"] == "Invalid payload"
    assert body["details"]

    r = client.post("/questions/validate", data="not json")
    assert r.status_code == 400


def test_score_question(client, mcq) -> None:
    r = client.post(
        "/questions/score",
        json={"question": mcq.to_json_dict(), "submission": {"type": "MCQ", "selectedIndex": 0}},
    )
    body = r.get_json()
    assert body["status"] == "graded"
    assert body["score"] == 10
    assert body["maxScore"] == 10


def test_judge_round_trip(client, code_input) -> None:
    r = client.post("/questions/judge-request", json={"question": code_input.to_json_dict(), "submission": {"code": "print(3)"}})
    assert r.status_code == 200
    assert len(r.get_json()["testCases"]) == 2

    r = client.post(
        "/questions/judge-results",
        json={
            "question": code_input.to_json_dict(),
            "results": [{"testCaseId": "tc1", "passed": True}, {"testCaseId": "tc2", "passed": True}],
        },
    )
    assert r.get_json()["score"] == 10


def test_judge_rejects_other_types(client, mcq) -> None:
    r = client.post("/questions/judge-request", json={"question": mcq.to_json_dict(), "submission": {}})
    assert r.status_code == 400


def test_validate_and_grade_quiz(client, mcq, true_false) -> None:
    quiz = new_quiz("Geography", questions=[mcq, true_false]).to_json_dict()
    r = client.post("/quizzes/validate", json=quiz)
    body = r.get_json()
    assert body["valid"] is True
    assert body["totalPoints"] == 20

    r = client.post(
        "/quizzes/grade",
        json={"quiz": quiz, "submissions": {"q_capital": {"type": "MCQ", "selectedIndex": 0}, "q_sky": None}},
    )
    body = r.get_json()
    assert body["earnedPoints"] == 10
    assert body["percentage"] == 50
    assert body["passed"] is False
    assert body["unansweredCount"] == 1
