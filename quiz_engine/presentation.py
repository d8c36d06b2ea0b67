from __future__ import annotations

import random
from typing import Optional

from .logging import get_logger
from .schemas import (
    BaseQuestion,
    CheckboxQuestion,
    DragDropQuestion,
    MatchingQuestion,
    MCQQuestion,
    Quiz,
)

logger = get_logger("presentation")


def _shuffled(rng: random.Random, seq):
    out = list(seq)
    rng.shuffle(out)
    return out


def _wants_option_shuffle(q, default: bool) -> bool:
    return default if q.shuffle_options is None else bool(q.shuffle_options)


def shuffle_question(q: BaseQuestion, rng: random.Random, *, shuffle_options: bool = False) -> BaseQuestion:
    """Return `q` with its choices in presentation order.

    Answer keys are id based. The MCQ index is also remapped inside the copy;
    learners answering from it should submit `selected_option_id`, which
    scores the same against the stored quiz.
    """
    if isinstance(q, MCQQuestion) and _wants_option_shuffle(q, shuffle_options):
        correct_id = q.options[q.correct_answer_index].id if 0 <= q.correct_answer_index < len(q.options) else None
        options = _shuffled(rng, q.options)
        new_index = next((i for i, o in enumerate(options) if o.id == correct_id), q.correct_answer_index)
        return q.model_copy(update={"options": options, "correct_answer_index": new_index})
    if isinstance(q, CheckboxQuestion) and _wants_option_shuffle(q, shuffle_options):
        return q.model_copy(update={"options": _shuffled(rng, q.options)})
    if isinstance(q, MatchingQuestion) and q.shuffle_items:
        return q.model_copy(update={"right_column": _shuffled(rng, q.right_column)})
    if isinstance(q, DragDropQuestion) and q.shuffle_items:
        return q.model_copy(update={"items": _shuffled(rng, q.items)})
    return q


def presentation_view(quiz: Quiz, seed: Optional[int] = None) -> Quiz:
    """The quiz as one learner sees it: question and choice order per the
    quiz settings, reproducible for a given seed."""
    rng = random.Random(seed)
    questions = list(quiz.questions)
    if quiz.settings.shuffle_questions:
        rng.shuffle(questions)
    questions = [shuffle_question(q, rng, shuffle_options=quiz.settings.shuffle_options) for q in questions]
    logger.debug("presentation_view quiz=%s seed=%s", quiz.id, seed)
    return quiz.model_copy(update={"questions": questions})
