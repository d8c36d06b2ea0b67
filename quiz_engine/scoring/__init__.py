from .engine import SCORERS, max_score, score, unanswered
from .preconditions import check_checkbox_selection, check_essay_length, check_submission
from .matchers import (
    blank_matches,
    score_checkbox,
    score_code_input,
    score_drag_drop,
    score_essay,
    score_fill_blank,
    score_matching,
    score_mcq,
    score_true_false,
)
from .code_judge import build_judge_request, score_judge_results
from .attempt import AttemptResult, QuestionResult, attempts_remaining, can_retake, grade_attempt

__all__ = [
    "score",
    "check_submission",
    "check_checkbox_selection",
    "check_essay_length",
    "unanswered",
    "max_score",
    "SCORERS",
    "blank_matches",
    "score_mcq",
    "score_true_false",
    "score_checkbox",
    "score_essay",
    "score_fill_blank",
    "score_matching",
    "score_drag_drop",
    "score_code_input",
    "build_judge_request",
    "score_judge_results",
    "grade_attempt",
    "can_retake",
    "attempts_remaining",
    "AttemptResult",
    "QuestionResult",
]
