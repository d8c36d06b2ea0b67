from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import Field

from ..logging import get_logger
from ..schemas import Quiz, QuizModel, QuizSettings, ScoreResult
from ..settings import SCORE_NDIGITS
from .engine import score

logger = get_logger("scoring.attempt")


class QuestionResult(QuizModel):
    question_id: str
    type: str
    difficulty: str
    result: ScoreResult


class AttemptResult(QuizModel):
    quiz_id: str
    earned_points: float = 0
    total_points: int = 0
    percentage: float = 0
    passed: bool = False
    is_final: bool = True
    correct_count: int = 0
    incorrect_count: int = 0
    pending_count: int = 0
    rejected_count: int = 0
    unanswered_count: int = 0
    question_results: List[QuestionResult] = Field(default_factory=list)
    difficulty_breakdown: Dict[str, Dict[str, int]] = Field(default_factory=dict)


def grade_attempt(quiz: Quiz, submissions: Mapping[str, Any]) -> AttemptResult:
    """Score every question of `quiz` against `submissions` (question id -> submission).

    Unanswered questions count as incorrect. Essay and code questions stay
    pending: their points are part of the total but cannot be earned here,
    so `passed` is provisional while `is_final` is False.
    """
    breakdown = {d: {"correct": 0, "total": 0} for d in ("easy", "medium", "hard")}
    results: List[QuestionResult] = []
    earned = 0.0
    counts = {"correct": 0, "incorrect": 0, "pending": 0, "rejected": 0, "unanswered": 0}

    for q in quiz.questions:
        sub = submissions.get(q.id)
        res = score(q, sub)
        results.append(QuestionResult(question_id=q.id, type=q.type, difficulty=q.difficulty, result=res))

        bucket = breakdown.setdefault(q.difficulty, {"correct": 0, "total": 0})
        bucket["total"] += 1
        if sub is None:
            counts["unanswered"] += 1
        if not res.is_graded:
            counts[res.status] += 1
            continue
        earned += res.score or 0
        if res.correct:
            counts["correct"] += 1
            bucket["correct"] += 1
        else:
            counts["incorrect"] += 1

    total = quiz.total_points
    percentage = round(earned / total * 100, SCORE_NDIGITS) if total else 0.0
    passed = percentage >= quiz.settings.passing_score
    logger.info(
        "attempt graded quiz=%s earned=%.2f/%d pct=%.2f passed=%s pending=%d",
        quiz.id, earned, total, percentage, passed, counts["pending"],
    )
    return AttemptResult(
        quiz_id=quiz.id,
        earned_points=round(earned, SCORE_NDIGITS),
        total_points=total,
        percentage=percentage,
        passed=passed,
        is_final=counts["pending"] == 0,
        correct_count=counts["correct"],
        incorrect_count=counts["incorrect"],
        pending_count=counts["pending"],
        rejected_count=counts["rejected"],
        unanswered_count=counts["unanswered"],
        question_results=results,
        difficulty_breakdown=breakdown,
    )


def attempts_remaining(settings: QuizSettings, attempts_used: int) -> Optional[int]:
    """None means unlimited."""
    if not settings.allow_retake:
        return max(0, 1 - attempts_used)
    if settings.max_attempts is None:
        return None
    return max(0, settings.max_attempts - attempts_used)


def can_retake(settings: QuizSettings, attempts_used: int) -> bool:
    left = attempts_remaining(settings, attempts_used)
    return left is None or left > 0
