from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, List, Optional, Sequence

from ..schemas import (
    SUPPORTED_LANGUAGES,
    BaseQuestion,
    CheckboxQuestion,
    ChoiceOption,
    CodeInputQuestion,
    DragDropQuestion,
    EssayQuestion,
    FillBlankQuestion,
    MatchingItem,
    MatchingQuestion,
    MCQQuestion,
    TrueFalseQuestion,
)
from ..settings import MAX_POINTS, MIN_POINTS
from ..utils import find_duplicates, is_blank
from .blanks import count_blanks


MCQ_OPTIONS = (2, 10)
CHECKBOX_OPTIONS = (2, 15)
MATCHING_ITEMS = (2, 10)
DRAG_ITEMS = (2, 20)
DROP_ZONES = (1, 6)
MAX_BLANKS = 20
BLANK_POINTS = (1, 10)


# --- shared rules ---
def validate_common(q: BaseQuestion) -> List[str]:
    errors: List[str] = []
    if is_blank(q.prompt):
        errors.append("Question prompt is required")
    if q.points < MIN_POINTS:
        errors.append(f"Points must be at least {MIN_POINTS}")
    elif q.points > MAX_POINTS:
        errors.append(f"Maximum {MAX_POINTS} points")
    if q.time_limit is not None and q.time_limit < 1:
        errors.append("Time limit must be at least 1 second")
    return errors


def _count_errors(n: int, bounds: tuple, noun: str) -> List[str]:
    lo, hi = bounds
    if n < lo:
        return [f"At least {lo} {noun} required"]
    if n > hi:
        return [f"Maximum {hi} {noun} allowed"]
    return []


def _option_errors(options: Sequence[ChoiceOption], bounds: tuple) -> List[str]:
    errors = _count_errors(len(options), bounds, "options")
    with_text = sum(1 for o in options if not is_blank(o.text))
    if with_text < 2:
        errors.append("At least 2 options must have text")
    dup_ids = find_duplicates(o.id for o in options)
    if dup_ids:
        errors.append(f"Duplicate option ids: {', '.join(dup_ids)}")
    return errors


def _column_errors(items: Sequence[MatchingItem], side: str) -> List[str]:
    errors = _count_errors(len(items), MATCHING_ITEMS, f"{side} items")
    for i, item in enumerate(items, start=1):
        if is_blank(item.text):
            errors.append(f"{side.capitalize()} item {i} text is required")
    texts = [item.text.strip().lower() for item in items if not is_blank(item.text)]
    if find_duplicates(texts):
        errors.append(f"Duplicate items found on the {side} side")
    return errors


# --- per type ---
def validate_mcq(q: MCQQuestion) -> List[str]:
    errors = validate_common(q)
    errors += _option_errors(q.options, MCQ_OPTIONS)
    idx = q.correct_answer_index
    if idx < 0 or idx >= len(q.options):
        errors.append("Invalid correct answer selection")
    elif is_blank(q.options[idx].text):
        errors.append("Correct answer option must have text")
    return errors


def validate_true_false(q: TrueFalseQuestion) -> List[str]:
    errors = validate_common(q)
    if q.prompt.count("?") > 1:
        errors.append("Question should contain only one question mark")
    return errors


def validate_checkbox(q: CheckboxQuestion) -> List[str]:
    errors = validate_common(q)
    errors += _option_errors(q.options, CHECKBOX_OPTIONS)

    if not q.correct_answers:
        errors.append("At least one correct answer must be selected")
    option_ids = {o.id for o in q.options}
    if any(cid not in option_ids for cid in q.correct_answers):
        errors.append("Some correct answers reference invalid options")
    else:
        for cid in q.correct_answers:
            opt = next(o for o in q.options if o.id == cid)
            if is_blank(opt.text):
                errors.append("Correct answer options must have text")
                break
    if find_duplicates(q.correct_answers):
        errors.append("Correct answers contain duplicates")

    n_opts = len(q.options)
    mn, mx, ex = q.min_selections, q.max_selections, q.exact_selections
    if mn is not None and mn < 0:
        errors.append("Minimum selections cannot be negative")
    if mx is not None and mx < 1:
        errors.append("Maximum selections must be at least 1")
    if mn is not None and mx is not None and mn > mx:
        errors.append("Minimum selections cannot be greater than maximum selections")
    if mn is not None and mn > n_opts:
        errors.append("Minimum selections cannot exceed number of options")
    if ex is not None:
        if mn is not None or mx is not None:
            errors.append("Cannot use exact selections with min/max selections")
        if ex < 1:
            errors.append("Exact selections must be at least 1")
        if ex > n_opts:
            errors.append("Exact selections cannot exceed number of options")
    return errors


def validate_essay(q: EssayQuestion) -> List[str]:
    errors = validate_common(q)
    if q.min_words is not None and q.min_words < 1:
        errors.append("Minimum word count must be at least 1")
    if q.max_words is not None and q.max_words < 1:
        errors.append("Maximum word count must be at least 1")
    if q.min_words is not None and q.max_words is not None and q.min_words >= q.max_words:
        errors.append("Minimum word count must be less than maximum word count")
    for i, c in enumerate(q.grading_criteria, start=1):
        if is_blank(c.name):
            errors.append(f"Grading criteria {i} must have a name")
        if c.max_points <= 0:
            errors.append(f"Grading criteria {i} must have points greater than 0")
        if not (0 < c.weight <= 1):
            errors.append(f"Grading criteria {i} weight must be between 0 and 1")
    return errors


def validate_fill_blank(q: FillBlankQuestion) -> List[str]:
    errors = validate_common(q)
    if is_blank(q.question_text):
        errors.append("Question text with blanks is required")

    detected = count_blanks(q.question_text)
    if not detected:
        errors.append("Question text must contain blank patterns (_____, [blank], {blank}, etc.)")
    if len(q.blanks) != detected:
        errors.append(
            f"Number of blank definitions ({len(q.blanks)}) must match detected blanks ({detected})"
        )
    if len(q.blanks) > MAX_BLANKS:
        errors.append(f"Maximum {MAX_BLANKS} blanks allowed")

    lo, hi = BLANK_POINTS
    for i, blank in enumerate(q.blanks, start=1):
        if all(is_blank(a) for a in blank.correct_answers):
            errors.append(f"Blank {i} must have at least one correct answer")
        if not (lo <= blank.points <= hi):
            errors.append(f"Blank {i} points must be between {lo} and {hi}")
    dup_ids = find_duplicates(b.id for b in q.blanks)
    if dup_ids:
        errors.append(f"Duplicate blank ids: {', '.join(dup_ids)}")

    if q.blanks:
        blank_total = sum(b.points for b in q.blanks)
        if blank_total != q.points:
            errors.append(f"Question points ({q.points}) must equal the sum of blank points ({blank_total})")
    return errors


def _pair_membership_errors(ids: Sequence[str], counts: Counter, side: str) -> List[str]:
    errors: List[str] = []
    for i, item_id in enumerate(ids, start=1):
        n = counts.get(item_id, 0)
        if n == 0:
            errors.append(f"{side.capitalize()} item {i} is not part of any pair")
        elif n > 1:
            errors.append(f"{side.capitalize()} item {i} appears in more than one pair")
    return errors


def validate_matching(q: MatchingQuestion) -> List[str]:
    errors = validate_common(q)
    errors += _column_errors(q.left_column, "left")
    errors += _column_errors(q.right_column, "right")
    if len(q.left_column) != len(q.right_column):
        errors.append("Left and right columns must have the same number of items")

    left_ids = [i.id for i in q.left_column]
    right_ids = [i.id for i in q.right_column]
    dup_ids = find_duplicates(left_ids + right_ids)
    if dup_ids:
        errors.append(f"Duplicate item ids: {', '.join(dup_ids)}")

    if not q.pairs:
        errors.append("At least one pair is required")
    seen = set()
    distinct = []
    for n, pair in enumerate(q.pairs, start=1):
        if pair.left_id not in left_ids:
            errors.append(f"Pair {n} references unknown left item '{pair.left_id}'")
        if pair.right_id not in right_ids:
            errors.append(f"Pair {n} references unknown right item '{pair.right_id}'")
        key = (pair.left_id, pair.right_id)
        if key in seen:
            errors.append(f"Duplicate pair ({pair.left_id}, {pair.right_id})")
            continue
        seen.add(key)
        distinct.append(key)

    if q.pairs:
        errors += _pair_membership_errors(left_ids, Counter(l for l, _ in distinct), "left")
        errors += _pair_membership_errors(right_ids, Counter(r for _, r in distinct), "right")
    return errors


def validate_drag_drop(q: DragDropQuestion) -> List[str]:
    errors = validate_common(q)
    errors += _count_errors(len(q.items), DRAG_ITEMS, "items")
    errors += _count_errors(len(q.zones), DROP_ZONES, "zones")

    for i, item in enumerate(q.items, start=1):
        if is_blank(item.text):
            errors.append(f"Item {i} content is required")
    if find_duplicates(item.text.strip().lower() for item in q.items if not is_blank(item.text)):
        errors.append("Duplicate items found")
    dup_items = find_duplicates(item.id for item in q.items)
    if dup_items:
        errors.append(f"Duplicate item ids: {', '.join(dup_items)}")

    zones_by_id = {}
    for i, zone in enumerate(q.zones, start=1):
        if is_blank(zone.label):
            errors.append(f"Zone {i} label is required")
        if zone.capacity is not None and zone.capacity < 1:
            errors.append(f"Zone {i} capacity must be at least 1")
        if zone.id in zones_by_id:
            errors.append(f"Duplicate zone id: {zone.id}")
        zones_by_id[zone.id] = zone

    item_ids = {item.id for item in q.items}
    assigned: Counter = Counter()
    for zone_id, placed in q.correct_answer.items():
        zone = zones_by_id.get(zone_id)
        if zone is None:
            errors.append(f"Answer key references unknown zone '{zone_id}'")
            continue
        name = zone.label or zone.id
        for item_id in placed:
            if item_id not in item_ids:
                errors.append(f"Zone '{name}' references unknown item '{item_id}'")
        assigned.update(placed)
        if zone.capacity is not None and len(placed) > zone.capacity:
            errors.append(f"Zone '{name}' holds {len(placed)} items but its capacity is {zone.capacity}")

    for zone in q.zones:
        if zone.required and not q.correct_answer.get(zone.id):
            errors.append(f"Zone '{zone.label or zone.id}' is required but has no items")

    for i, item in enumerate(q.items, start=1):
        n = assigned.get(item.id, 0)
        if n == 0:
            errors.append(f"Item {i} is not assigned to a zone")
        elif n > 1:
            errors.append(f"Item {i} is assigned to more than one zone")
    return errors


def validate_code_input(q: CodeInputQuestion) -> List[str]:
    errors = validate_common(q)
    if is_blank(q.language):
        errors.append("Programming language is required")
    elif q.language not in SUPPORTED_LANGUAGES:
        errors.append(f"Unsupported programming language '{q.language}'")

    if not q.test_cases:
        errors.append("At least one test case is required")
    elif not any(not is_blank(tc.input) and not is_blank(tc.expected_output) for tc in q.test_cases):
        errors.append("At least one valid test case is required")
    for i, tc in enumerate(q.test_cases, start=1):
        if tc.points is not None and tc.points < 1:
            errors.append(f"Test case {i} points must be at least 1")
    dup_ids = find_duplicates(tc.id for tc in q.test_cases)
    if dup_ids:
        errors.append(f"Duplicate test case ids: {', '.join(dup_ids)}")

    if q.time_limit is None:
        errors.append("Time limit is required")
    if q.memory_limit < 1:
        errors.append("Memory limit must be at least 1 MB")
    return errors


VALIDATORS: Dict[str, Callable[..., List[str]]] = {
    "MCQ": validate_mcq,
    "TRUE_FALSE": validate_true_false,
    "CHECKBOX": validate_checkbox,
    "ESSAY": validate_essay,
    "FILL_BLANK": validate_fill_blank,
    "MATCHING": validate_matching,
    "DRAG_DROP": validate_drag_drop,
    "CODE_INPUT": validate_code_input,
}


def get_validator(question_type: str) -> Optional[Callable[..., List[str]]]:
    return VALIDATORS.get(question_type)
