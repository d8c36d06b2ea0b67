from __future__ import annotations

import json
from typing import Any, Dict

from flask import Flask, jsonify, request
from pydantic import ValidationError

from .errors import QuizEngineError, UnknownQuestionType
from .logging import configure_logging, get_logger
from .registry import QUESTION_TYPES, create_default
from .schemas import CodeInputQuestion, Quiz, TestCaseResult, parse_question, parse_submission
from .scoring import build_judge_request, grade_attempt, score, score_judge_results
from .validation import validate, validate_quiz

logger = get_logger("api")


def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise QuizEngineError("Missing JSON body")
    return data


def _code_question(data: Dict[str, Any]) -> CodeInputQuestion:
    q = parse_question(data.get("question") or {})
    if not isinstance(q, CodeInputQuestion):
        raise QuizEngineError("Judge endpoints only accept CODE_INPUT questions")
    return q


def create_app() -> Flask:
    configure_logging()
    app = Flask(__name__)

    @app.errorhandler(ValidationError)
    def _invalid_payload(e: ValidationError):
        logger.info("rejected payload on %s: %d problems", request.path, e.error_count())
        return jsonify({"error": "Invalid payload", "details": json.loads(e.json(include_url=False))}), 400

    @app.errorhandler(UnknownQuestionType)
    def _unknown_type(e: UnknownQuestionType):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(QuizEngineError)
    def _engine_error(e: QuizEngineError):
        return jsonify({"error": str(e)}), 400

    @app.route("/question-types", methods=["GET"])
    def question_types():
        return jsonify(QUESTION_TYPES)

    @app.route("/questions/defaults/<qtype>", methods=["GET"])
    def question_default(qtype: str):
        return jsonify(create_default(qtype).to_json_dict())

    @app.route("/questions/validate", methods=["POST"])
    def question_validate():
        q = parse_question(_body())
        errors = validate(q)
        return jsonify({"valid": not errors, "errors": errors})

    @app.route("/questions/score", methods=["POST"])
    def question_score():
        data = _body()
        q = parse_question(data.get("question") or {})
        raw = data.get("submission")
        sub = parse_submission(raw) if raw is not None else None
        return jsonify(score(q, sub).to_json_dict())

    @app.route("/questions/judge-request", methods=["POST"])
    def judge_request():
        data = _body()
        q = _code_question(data)
        sub = parse_submission({"type": "CODE_INPUT", **(data.get("submission") or {})})
        return jsonify(build_judge_request(q, sub).to_json_dict())

    @app.route("/questions/judge-results", methods=["POST"])
    def judge_results():
        data = _body()
        q = _code_question(data)
        results = [TestCaseResult.model_validate(r) for r in (data.get("results") or [])]
        return jsonify(score_judge_results(q, results).to_json_dict())

    @app.route("/quizzes/validate", methods=["POST"])
    def quiz_validate():
        quiz = Quiz.model_validate(_body())
        errors = validate_quiz(quiz)
        return jsonify({
            "valid": not errors,
            "errors": errors,
            "totalPoints": quiz.total_points,
            "totalQuestions": quiz.total_questions,
        })

    @app.route("/quizzes/grade", methods=["POST"])
    def quiz_grade():
        data = _body()
        quiz = Quiz.model_validate(data.get("quiz") or {})
        raw = data.get("submissions") or {}
        if not isinstance(raw, dict):
            raise QuizEngineError("submissions must be an object keyed by question id")
        submissions = {qid: parse_submission(s) for qid, s in raw.items() if s is not None}
        return jsonify(grade_attempt(quiz, submissions).to_json_dict())

    return app
