from .registry import QUESTION_TYPES, create_default, resolve_type, type_info
from .validation import validate, is_valid, validate_quiz, detect_blanks
from .scoring import score, max_score, grade_attempt, can_retake, build_judge_request, score_judge_results
from .quiz import (
    new_quiz,
    add_question,
    update_question,
    delete_question,
    reorder,
    move_question,
    duplicate_question,
    update_settings,
    total_points,
    total_questions,
)
from .lifecycle import QuestionStatus, QuestionDraft, start_draft, edit_draft, check_draft, save_draft
from .presentation import presentation_view

__all__ = [
    "QUESTION_TYPES",
    "create_default",
    "resolve_type",
    "type_info",
    "validate",
    "is_valid",
    "validate_quiz",
    "detect_blanks",
    "score",
    "max_score",
    "grade_attempt",
    "can_retake",
    "build_judge_request",
    "score_judge_results",
    "new_quiz",
    "add_question",
    "update_question",
    "delete_question",
    "reorder",
    "move_question",
    "duplicate_question",
    "update_settings",
    "total_points",
    "total_questions",
    "QuestionStatus",
    "QuestionDraft",
    "start_draft",
    "edit_draft",
    "check_draft",
    "save_draft",
    "presentation_view",
]
