"""Tests for question and quiz validation."""

import pytest

from quiz_engine import detect_blanks, new_quiz, validate, validate_quiz
from quiz_engine.schemas import Blank, ChoiceOption, DropZone, MatchingPair


def test_fixtures_are_valid(all_questions) -> None:
    for q in all_questions:
        assert validate(q) == [], q.type


def test_validate_is_pure(all_questions) -> None:
    for q in all_questions:
        broken = q.model_copy(update={"prompt": "", "points": 0})
        assert validate(broken) == validate(broken)
        assert broken.prompt == ""


def test_unknown_object_is_reported_not_raised() -> None:
    assert validate(object()) == ["Unknown question type: None"]


@pytest.mark.parametrize(
    "points,message",
    [(0, "Points must be at least 1"), (101, "Maximum 100 points")],
)
def test_points_bounds(mcq, points, message) -> None:
    assert message in validate(mcq.model_copy(update={"points": points}))


@pytest.mark.parametrize(
    "texts,index,valid",
    [
        (["Paris", "London"], 0, True),
        (["Paris", ""], 0, False),
        (["Paris", "London", ""], 2, False),
        (["Paris", "London"], 2, False),
        (["Paris", "London"], -1, False),
    ],
)
def test_mcq_valid_iff_two_texts_and_answer_in_range(mcq, texts, index, valid) -> None:
    options = [ChoiceOption(id=f"o{i}", text=t) for i, t in enumerate(texts)]
    q = mcq.model_copy(update={"options": options, "correct_answer_index": index})
    assert (validate(q) == []) is valid


def test_mcq_index_out_of_range_message(mcq) -> None:
    q = mcq.model_copy(update={"correct_answer_index": 7})
    assert "Invalid correct answer selection" in validate(q)


def test_true_false_single_question_mark(true_false) -> None:
    q = true_false.model_copy(update={"prompt": "Is it? Really?"})
    assert "Question should contain only one question mark" in validate(q)


def test_checkbox_needs_correct_answers(checkbox) -> None:
    errors = validate(checkbox.model_copy(update={"correct_answers": []}))
    assert "At least one correct answer must be selected" in errors


def test_checkbox_unknown_answer_id(checkbox) -> None:
    errors = validate(checkbox.model_copy(update={"correct_answers": ["a", "zz"]}))
    assert "Some correct answers reference invalid options" in errors


def test_checkbox_selection_rules(checkbox) -> None:
    errors = validate(checkbox.model_copy(update={"exact_selections": 2, "min_selections": 1}))
    assert "Cannot use exact selections with min/max selections" in errors
    errors = validate(checkbox.model_copy(update={"min_selections": 3, "max_selections": 2}))
    assert "Minimum selections cannot be greater than maximum selections" in errors
    errors = validate(checkbox.model_copy(update={"exact_selections": 5}))
    assert "Exact selections cannot exceed number of options" in errors


def test_essay_word_limits(essay) -> None:
    errors = validate(essay.model_copy(update={"min_words": 50, "max_words": 10}))
    assert "Minimum word count must be less than maximum word count" in errors


def test_detect_blanks_marker_kinds() -> None:
    text = "A __1__ then [blank] then {x} then ( ) then _____."
    assert detect_blanks(text) == ["__1__", "[blank]", "{x}", "( )", "_____"]


def test_detect_blanks_counts_repeats() -> None:
    assert len(detect_blanks("___ and ___")) == 2
    assert detect_blanks("no markers here, only __ two underscores") == []


def test_fill_blank_count_mismatch(fill_blank) -> None:
    q = fill_blank.model_copy(update={"blanks": [Blank(id="b1", correct_answers=["Paris"], points=5)]})
    errors = validate(q)
    assert "Number of blank definitions (1) must match detected blanks (2)" in errors
    assert "Question points (10) must equal the sum of blank points (5)" in errors


def test_fill_blank_without_markers(fill_blank) -> None:
    errors = validate(fill_blank.model_copy(update={"question_text": "Paris is the capital of France."}))
    assert any(e.startswith("Question text must contain blank patterns") for e in errors)


def test_fill_blank_empty_answers(fill_blank) -> None:
    blanks = [Blank(id="b1", correct_answers=["  "], points=5), fill_blank.blanks[1]]
    assert "Blank 1 must have at least one correct answer" in validate(fill_blank.model_copy(update={"blanks": blanks}))


def test_matching_unknown_reference(matching) -> None:
    pairs = [MatchingPair(left_id="l1", right_id="r1"), MatchingPair(left_id="l2", right_id="r9")]
    errors = validate(matching.model_copy(update={"pairs": pairs}))
    assert "Pair 2 references unknown right item 'r9'" in errors
    assert "Right item 2 is not part of any pair" in errors


def test_matching_left_item_in_two_pairs(matching) -> None:
    pairs = [MatchingPair(left_id="l1", right_id="r1"), MatchingPair(left_id="l1", right_id="r2")]
    errors = validate(matching.model_copy(update={"pairs": pairs}))
    assert "Left item 1 appears in more than one pair" in errors
    assert "Left item 2 is not part of any pair" in errors


def test_drag_drop_item_in_two_zones(drag_drop) -> None:
    key = {"z1": ["d1", "d2"], "z2": ["d3", "d1"]}
    assert "Item 1 is assigned to more than one zone" in validate(drag_drop.model_copy(update={"correct_answer": key}))


def test_drag_drop_capacity_and_required(drag_drop) -> None:
    zones = [DropZone(id="z1", label="Fruits", capacity=1), DropZone(id="z2", label="Vegetables"), DropZone(id="z3", label="Grains", required=True)]
    errors = validate(drag_drop.model_copy(update={"zones": zones}))
    assert "Zone 'Fruits' holds 2 items but its capacity is 1" in errors
    assert "Zone 'Grains' is required but has no items" in errors


def test_code_input_rules(code_input) -> None:
    assert "Unsupported programming language 'cobol'" in validate(code_input.model_copy(update={"language": "cobol"}))
    assert "At least one test case is required" in validate(code_input.model_copy(update={"test_cases": []}))
    assert "Time limit is required" in validate(code_input.model_copy(update={"time_limit": None}))


def test_validate_quiz_prefixes_question_errors(mcq, true_false) -> None:
    quiz = new_quiz("Geography", questions=[mcq, true_false.model_copy(update={"prompt": ""})])
    assert validate_quiz(quiz) == ["Question 2 (TRUE_FALSE): Question prompt is required"]


def test_validate_quiz_level_rules() -> None:
    quiz = new_quiz("", passing_score=120, allow_retake=False, max_attempts=3)
    errors = validate_quiz(quiz)
    assert "Quiz title is required" in errors
    assert "Quiz must contain at least one question" in errors
    assert "Passing score must be between 0 and 100" in errors
    assert "Max attempts above 1 requires retakes to be allowed" in errors
