from __future__ import annotations

from typing import List

from ..logging import get_logger
from ..schemas import BaseQuestion, Quiz
from ..utils import find_duplicates, is_blank
from .blanks import count_blanks, detect_blanks
from .validators import (
    VALIDATORS,
    get_validator,
    validate_checkbox,
    validate_code_input,
    validate_common,
    validate_drag_drop,
    validate_essay,
    validate_fill_blank,
    validate_matching,
    validate_mcq,
    validate_true_false,
)

logger = get_logger("validation")


def validate(question: BaseQuestion) -> List[str]:
    """Human-readable problems with a question definition; empty means valid.

    Never raises: an object that is not a known question variant is reported
    as an error like any other problem.
    """
    qtype = getattr(question, "type", None)
    fn = get_validator(qtype) if isinstance(qtype, str) else None
    if fn is None or not isinstance(question, BaseQuestion):
        return [f"Unknown question type: {qtype!r}"]
    errors = fn(question)
    logger.debug("validate type=%s id=%s errors=%d", qtype, question.id, len(errors))
    return errors


def is_valid(question: BaseQuestion) -> bool:
    return not validate(question)


def validate_settings(quiz: Quiz) -> List[str]:
    s = quiz.settings
    errors: List[str] = []
    if not (0 <= s.passing_score <= 100):
        errors.append("Passing score must be between 0 and 100")
    if s.time_limit is not None and s.time_limit < 1:
        errors.append("Quiz time limit must be at least 1 minute")
    if s.max_attempts is not None:
        if s.max_attempts < 1:
            errors.append("Max attempts must be at least 1")
        elif s.max_attempts > 1 and not s.allow_retake:
            errors.append("Max attempts above 1 requires retakes to be allowed")
    return errors


def validate_quiz(quiz: Quiz) -> List[str]:
    """Quiz-level rules plus every question's own rules, prefixed by position."""
    errors: List[str] = []
    if is_blank(quiz.title):
        errors.append("Quiz title is required")
    if not quiz.questions:
        errors.append("Quiz must contain at least one question")
    dup_ids = find_duplicates(q.id for q in quiz.questions)
    if dup_ids:
        errors.append(f"Duplicate question ids: {', '.join(dup_ids)}")
    errors += validate_settings(quiz)

    for n, q in enumerate(quiz.questions, start=1):
        for e in validate(q):
            errors.append(f"Question {n} ({q.type}): {e}")
    logger.debug("validate_quiz id=%s questions=%d errors=%d", quiz.id, len(quiz.questions), len(errors))
    return errors


__all__ = [
    "validate",
    "is_valid",
    "validate_quiz",
    "validate_settings",
    "detect_blanks",
    "count_blanks",
    "VALIDATORS",
    "validate_common",
    "validate_mcq",
    "validate_true_false",
    "validate_checkbox",
    "validate_essay",
    "validate_fill_blank",
    "validate_matching",
    "validate_drag_drop",
    "validate_code_input",
]
