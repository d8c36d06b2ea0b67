from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Union

from .errors import DuplicateQuestionError, QuestionNotFoundError, ReorderError
from .logging import get_logger
from .schemas import BaseQuestion, Quiz, QuizSettings, parse_question
from .utils import find_duplicates, new_id, utcnow

logger = get_logger("quiz")

QuestionLike = Union[BaseQuestion, Mapping[str, Any]]


def new_quiz(title: str = "", *, description: str | None = None, questions: Sequence[QuestionLike] = (), **settings: Any) -> Quiz:
    quiz = Quiz(
        title=title,
        description=description,
        settings=QuizSettings(**settings),
    )
    for q in questions:
        quiz = add_question(quiz, q)
    return quiz


def _with_questions(quiz: Quiz, questions: List[BaseQuestion]) -> Quiz:
    return quiz.model_copy(update={"questions": questions, "updated_at": utcnow()})


def _index_of(quiz: Quiz, question_id: str) -> int:
    for i, q in enumerate(quiz.questions):
        if q.id == question_id:
            return i
    return -1


def add_question(quiz: Quiz, question: QuestionLike) -> Quiz:
    """Append a copy of `question`; the quiz never shares question objects with callers."""
    q = parse_question(question).model_copy(deep=True)
    if _index_of(quiz, q.id) >= 0:
        raise DuplicateQuestionError(q.id)
    logger.info("add_question quiz=%s question=%s type=%s", quiz.id, q.id, q.type)
    return _with_questions(quiz, [*quiz.questions, q])


def update_question(quiz: Quiz, question_id: str, changes: Union[QuestionLike, Dict[str, Any]]) -> Quiz:
    """Replace a question, or apply field updates to it.

    `changes` may be a full question (its id is forced to `question_id`) or a
    dict of field updates; updates are re-validated, so changing `type`
    yields the matching variant.
    """
    idx = _index_of(quiz, question_id)
    if idx < 0:
        raise QuestionNotFoundError(question_id)
    current = quiz.questions[idx]

    if isinstance(changes, BaseQuestion):
        data = changes.model_dump()
    else:
        data = {**current.model_dump(), **dict(changes)}
    data["id"] = question_id
    data["created_at"] = current.created_at
    data["updated_at"] = utcnow()
    updated = parse_question(data)

    questions = list(quiz.questions)
    questions[idx] = updated
    logger.info("update_question quiz=%s question=%s", quiz.id, question_id)
    return _with_questions(quiz, questions)


def delete_question(quiz: Quiz, question_id: str) -> Quiz:
    """Remove a question. Unknown ids leave the quiz unchanged."""
    if _index_of(quiz, question_id) < 0:
        logger.debug("delete_question quiz=%s question=%s not present", quiz.id, question_id)
        return quiz
    logger.info("delete_question quiz=%s question=%s", quiz.id, question_id)
    return _with_questions(quiz, [q for q in quiz.questions if q.id != question_id])


def reorder(quiz: Quiz, new_order: Sequence[str]) -> Quiz:
    """Reorder questions by id. `new_order` must name every question exactly once."""
    current = [q.id for q in quiz.questions]
    dups = find_duplicates(new_order)
    if dups:
        raise ReorderError(f"Question ids repeated in new order: {', '.join(dups)}")
    if set(new_order) != set(current) or len(new_order) != len(current):
        missing = sorted(set(current) - set(new_order))
        unknown = sorted(set(new_order) - set(current))
        raise ReorderError(f"New order must be a permutation of the quiz questions (missing={missing}, unknown={unknown})")
    by_id = {q.id: q for q in quiz.questions}
    return _with_questions(quiz, [by_id[qid] for qid in new_order])


def move_question(quiz: Quiz, question_id: str, new_index: int) -> Quiz:
    idx = _index_of(quiz, question_id)
    if idx < 0:
        raise QuestionNotFoundError(question_id)
    order = [q.id for q in quiz.questions]
    order.pop(idx)
    new_index = max(0, min(new_index, len(order)))
    order.insert(new_index, question_id)
    return reorder(quiz, order)


def duplicate_question(quiz: Quiz, question_id: str) -> Quiz:
    """Insert a copy with a fresh id right after the original."""
    idx = _index_of(quiz, question_id)
    if idx < 0:
        raise QuestionNotFoundError(question_id)
    now = utcnow()
    copy = quiz.questions[idx].model_copy(
        deep=True, update={"id": new_id("q"), "created_at": now, "updated_at": now}
    )
    questions = list(quiz.questions)
    questions.insert(idx + 1, copy)
    logger.info("duplicate_question quiz=%s source=%s copy=%s", quiz.id, question_id, copy.id)
    return _with_questions(quiz, questions)


def update_settings(quiz: Quiz, **changes: Any) -> Quiz:
    settings = QuizSettings(**{**quiz.settings.model_dump(), **changes})
    return quiz.model_copy(update={"settings": settings, "updated_at": utcnow()})


def total_points(quiz: Quiz) -> int:
    return quiz.total_points


def total_questions(quiz: Quiz) -> int:
    return quiz.total_questions
