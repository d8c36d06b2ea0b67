from __future__ import annotations

from typing import List

from ..schemas import (
    BaseQuestion,
    CheckboxQuestion,
    CheckboxSubmission,
    EssayQuestion,
    EssaySubmission,
)
from ..utils import count_words, plural, unique_preserving_order


def check_checkbox_selection(q: CheckboxQuestion, sub: CheckboxSubmission) -> List[str]:
    n = len(unique_preserving_order(sub.selected_option_ids))
    if q.exact_selections is not None:
        if n != q.exact_selections:
            return [f"You must select exactly {plural(q.exact_selections, 'option')}"]
        return []
    errors: List[str] = []
    if q.min_selections is not None and n < q.min_selections:
        errors.append(f"You must select at least {plural(q.min_selections, 'option')}")
    if q.max_selections is not None and n > q.max_selections:
        errors.append(f"You can select maximum {plural(q.max_selections, 'option')}")
    return errors


def check_essay_length(q: EssayQuestion, sub: EssaySubmission) -> List[str]:
    words = count_words(sub.text)
    errors: List[str] = []
    if q.min_words is not None and words < q.min_words:
        errors.append(f"Answer must be at least {plural(q.min_words, 'word')} (currently {words})")
    if q.max_words is not None and words > q.max_words:
        errors.append(f"Answer must be at most {plural(q.max_words, 'word')} (currently {words})")
    return errors


def check_submission(question: BaseQuestion, submission) -> List[str]:
    """Rules a submission must meet before it is scored at all.

    These are about the shape of the learner's answer (how many boxes were
    ticked, how long the essay is), not about whether it is right.
    """
    if isinstance(question, CheckboxQuestion) and isinstance(submission, CheckboxSubmission):
        return check_checkbox_selection(question, submission)
    if isinstance(question, EssayQuestion) and isinstance(submission, EssaySubmission):
        return check_essay_length(question, submission)
    return []
