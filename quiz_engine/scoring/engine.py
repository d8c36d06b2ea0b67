from __future__ import annotations

from typing import Callable, Dict

from ..logging import get_logger
from ..schemas import BaseQuestion, ScoreResult, effective_points, parse_submission
from .matchers import (
    score_checkbox,
    score_code_input,
    score_drag_drop,
    score_essay,
    score_fill_blank,
    score_matching,
    score_mcq,
    score_true_false,
)
from .preconditions import check_submission

logger = get_logger("scoring")

SCORERS: Dict[str, Callable[..., ScoreResult]] = {
    "MCQ": score_mcq,
    "TRUE_FALSE": score_true_false,
    "CHECKBOX": score_checkbox,
    "ESSAY": score_essay,
    "FILL_BLANK": score_fill_blank,
    "MATCHING": score_matching,
    "DRAG_DROP": score_drag_drop,
    "CODE_INPUT": score_code_input,
}


def unanswered(question: BaseQuestion) -> ScoreResult:
    return ScoreResult(
        status="graded",
        correct=False,
        score=0,
        max_score=effective_points(question),
        feedback="No answer submitted",
    )


def score(question: BaseQuestion, submission) -> ScoreResult:
    """Grade one learner submission against a question's answer key.

    `submission` may be a submission model, a dict in wire form, or None for
    an unanswered question. A submission of the wrong type scores zero.
    Submissions that break the question's selection or length rules come
    back with status "rejected" and no score.
    """
    if submission is None:
        return unanswered(question)
    if isinstance(submission, dict):
        submission = parse_submission(submission)

    if getattr(submission, "type", None) != question.type:
        logger.warning("submission type %s does not match question %s (%s)", getattr(submission, "type", None), question.id, question.type)
        res = unanswered(question)
        return res.model_copy(update={"feedback": f"Submission type does not match question type {question.type}"})

    errors = check_submission(question, submission)
    if errors:
        logger.info("submission rejected question=%s errors=%s", question.id, errors)
        return ScoreResult(
            status="rejected",
            max_score=effective_points(question),
            errors=errors,
            feedback=errors[0],
        )

    result = SCORERS[question.type](question, submission)
    logger.debug("scored question=%s type=%s status=%s score=%s/%s", question.id, question.type, result.status, result.score, result.max_score)
    return result


def max_score(question: BaseQuestion) -> int:
    return effective_points(question)
