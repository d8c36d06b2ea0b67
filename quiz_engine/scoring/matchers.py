from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from ..logging import get_logger
from ..schemas import (
    Blank,
    CheckboxQuestion,
    CheckboxSubmission,
    CodeInputQuestion,
    CodeInputSubmission,
    DragDropQuestion,
    DragDropSubmission,
    EssayQuestion,
    EssaySubmission,
    FillBlankQuestion,
    FillBlankSubmission,
    MatchingQuestion,
    MatchingSubmission,
    MCQQuestion,
    MCQSubmission,
    ScoreResult,
    TrueFalseQuestion,
    TrueFalseSubmission,
    effective_points,
)
from ..settings import FILL_BLANK_SUBSTRING_MATCH, SCORE_NDIGITS
from ..utils import count_words, normalize_answer

logger = get_logger("scoring")


def graded(max_score: float, earned: float, correct: bool, *, feedback: Optional[str] = None, details: Optional[dict] = None) -> ScoreResult:
    earned = min(max(0.0, float(earned)), float(max_score))
    return ScoreResult(
        status="graded",
        correct=bool(correct),
        score=round(earned, SCORE_NDIGITS),
        max_score=max_score,
        feedback=feedback,
        details=details or {},
    )


def pending(max_score: float, feedback: str, details: Optional[dict] = None) -> ScoreResult:
    return ScoreResult(status="pending", correct=None, score=None, max_score=max_score, feedback=feedback, details=details or {})


# --- single answer ---
def _mcq_choice(q: MCQQuestion, sub: MCQSubmission) -> Optional[int]:
    # an option id survives shuffling; a bare index refers to the stored order
    if sub.selected_option_id is not None:
        return next((i for i, o in enumerate(q.options) if o.id == sub.selected_option_id), None)
    return sub.selected_index


def score_mcq(q: MCQQuestion, sub: MCQSubmission) -> ScoreResult:
    idx = _mcq_choice(q, sub)
    correct = idx is not None and idx == q.correct_answer_index
    feedback = None
    if q.show_explanation:
        chosen = q.options[idx] if idx is not None and 0 <= idx < len(q.options) else None
        feedback = (chosen.explanation if chosen and chosen.explanation else None) or q.explanation
    return graded(q.points, q.points if correct else 0, correct, feedback=feedback, details={"selected_index": idx, "selected_option_id": sub.selected_option_id})


def score_true_false(q: TrueFalseQuestion, sub: TrueFalseSubmission) -> ScoreResult:
    correct = sub.answer is not None and sub.answer == q.correct_answer
    feedback = None
    if q.show_explanation and sub.answer is not None:
        feedback = (q.true_explanation if sub.answer else q.false_explanation) or q.explanation
    return graded(q.points, q.points if correct else 0, correct, feedback=feedback, details={"answer": sub.answer})


# --- multi select ---
def score_checkbox(q: CheckboxQuestion, sub: CheckboxSubmission) -> ScoreResult:
    expected: Set[str] = set(q.correct_answers)
    selected: Set[str] = set(sub.selected_option_ids)
    hits = len(selected & expected)
    wrong = len(selected - expected)
    details = {"correct_selected": hits, "incorrect_selected": wrong, "missed": len(expected - selected)}
    exact = bool(expected) and selected == expected

    if not q.allow_partial_credit:
        return graded(q.points, q.points if exact else 0, exact, details=details)
    if not expected:
        return graded(q.points, 0, False, details=details)

    net = max(0, hits - (wrong if q.penalize_incorrect else 0))
    earned = q.points * net / len(expected)
    logger.thinking(
        "checkbox id=%s hits=%d wrong=%d penalize=%s -> %.2f/%d",
        q.id, hits, wrong, q.penalize_incorrect, earned, q.points,
    )
    return graded(q.points, earned, exact, details=details)


# --- fill in the blank ---
def blank_matches(blank: Blank, answer: Optional[str], *, substring_match: bool = FILL_BLANK_SUBSTRING_MATCH) -> bool:
    """True when `answer` is one of the blank's accepted answers.

    Exact blanks compare trimmed text. Other blanks also collapse runs of
    whitespace, and with `substring_match` accept containment either way.
    """
    loose = not blank.exact_match
    given = normalize_answer(answer, case_sensitive=blank.case_sensitive, collapse_ws=loose)
    if not given:
        return False
    for accepted in blank.correct_answers:
        expected = normalize_answer(accepted, case_sensitive=blank.case_sensitive, collapse_ws=loose)
        if not expected:
            continue
        if given == expected:
            return True
        if loose and substring_match and (expected in given or given in expected):
            return True
    return False


def score_fill_blank(q: FillBlankQuestion, sub: FillBlankSubmission, *, substring_match: bool = FILL_BLANK_SUBSTRING_MATCH) -> ScoreResult:
    max_score = effective_points(q)
    per_blank: Dict[str, bool] = {}
    earned = 0
    for blank in q.blanks:
        ok = blank_matches(blank, sub.answers.get(blank.id), substring_match=substring_match)
        per_blank[blank.id] = ok
        if ok:
            earned += blank.points
    correct = bool(q.blanks) and all(per_blank.values())
    logger.thinking("fill_blank id=%s blanks=%s -> %d/%d", q.id, per_blank, earned, max_score)
    return graded(max_score, earned, correct, details={"blanks": per_blank})


# --- matching ---
def score_matching(q: MatchingQuestion, sub: MatchingSubmission) -> ScoreResult:
    defined = {(p.left_id, p.right_id) for p in q.pairs}
    kept: List[Tuple[str, str]] = []
    for pair in sub.pairs:
        # a new link replaces any earlier one touching either item
        kept = [(l, r) for l, r in kept if l != pair.left_id and r != pair.right_id]
        kept.append((pair.left_id, pair.right_id))
    matched = sum(1 for key in kept if key in defined)
    total = len(defined)
    earned = q.points * matched / total if total else 0
    correct = total > 0 and matched == total
    logger.thinking("matching id=%s matched=%d/%d -> %.2f", q.id, matched, total, earned)
    return graded(q.points, earned, correct, details={"matched": matched, "total": total})


# --- drag & drop ---
def score_drag_drop(q: DragDropQuestion, sub: DragDropSubmission) -> ScoreResult:
    expected: Dict[str, str] = {}
    for zone_id, item_ids in q.correct_answer.items():
        for item_id in item_ids:
            expected.setdefault(item_id, zone_id)

    placed: Dict[str, Set[str]] = {}
    for zone_id, item_ids in sub.placements.items():
        for item_id in item_ids:
            placed.setdefault(item_id, set()).add(zone_id)

    in_place: List[str] = [
        item.id for item in q.items
        if item.id in expected and placed.get(item.id) == {expected[item.id]}
    ]
    total = len(q.items)
    earned = q.points * len(in_place) / total if total else 0
    correct = total > 0 and len(in_place) == total
    logger.thinking("drag_drop id=%s in_place=%d/%d -> %.2f", q.id, len(in_place), total, earned)
    return graded(q.points, earned, correct, details={"in_place": len(in_place), "total": total})


# --- manual / external ---
def score_essay(q: EssayQuestion, sub: EssaySubmission) -> ScoreResult:
    return pending(q.points, "Pending manual grading", details={"word_count": count_words(sub.text)})


def score_code_input(q: CodeInputQuestion, sub: CodeInputSubmission) -> ScoreResult:
    return pending(
        q.points,
        "Pending evaluation by code judge",
        details={"test_cases": len(q.test_cases), "language": sub.language or q.language},
    )
