from __future__ import annotations

from enum import Enum
from typing import Any, List, Tuple

from pydantic import Field

from .errors import DraftNotValidError
from .logging import get_logger
from .quiz import add_question, update_question
from .schemas import BaseQuestion, Question, Quiz, QuizModel, parse_question
from .utils import utcnow
from .validation import validate

logger = get_logger("lifecycle")


class QuestionStatus(str, Enum):
    DRAFT = "DRAFT"
    VALID = "VALID"
    SAVED = "SAVED"


class QuestionDraft(QuizModel):
    """A question being edited in the builder, with its lifecycle state.

    DRAFT -> VALID once `check_draft` finds no errors, VALID -> SAVED through
    `save_draft`. Any edit sends it back to DRAFT.
    """

    question: Question
    status: QuestionStatus = QuestionStatus.DRAFT
    errors: List[str] = Field(default_factory=list)


def start_draft(question: Any) -> QuestionDraft:
    return QuestionDraft(question=parse_question(question), status=QuestionStatus.DRAFT)


def edit_draft(draft: QuestionDraft, **changes: Any) -> QuestionDraft:
    data = {**draft.question.model_dump(), **changes, "updated_at": utcnow()}
    return QuestionDraft(question=parse_question(data), status=QuestionStatus.DRAFT)


def check_draft(draft: QuestionDraft) -> QuestionDraft:
    errors = validate(draft.question)
    if errors:
        return draft.model_copy(update={"status": QuestionStatus.DRAFT, "errors": errors})
    if draft.status == QuestionStatus.SAVED:
        return draft
    return draft.model_copy(update={"status": QuestionStatus.VALID, "errors": []})


def save_draft(quiz: Quiz, draft: QuestionDraft) -> Tuple[Quiz, QuestionDraft]:
    """Store a VALID draft in the quiz (adding or replacing by id)."""
    if draft.status != QuestionStatus.VALID:
        raise DraftNotValidError(draft.errors)
    q: BaseQuestion = draft.question
    if quiz.get_question(q.id) is None:
        quiz = add_question(quiz, q)
    else:
        quiz = update_question(quiz, q.id, q)
    logger.info("draft saved quiz=%s question=%s", quiz.id, q.id)
    return quiz, draft.model_copy(update={"status": QuestionStatus.SAVED, "errors": []})
