from __future__ import annotations

import pytest

from quiz_engine.schemas import (
    Blank,
    CheckboxQuestion,
    ChoiceOption,
    CodeInputQuestion,
    CodeTestCase,
    DragDropQuestion,
    DragItem,
    DropZone,
    EssayQuestion,
    FillBlankQuestion,
    MatchingItem,
    MatchingPair,
    MatchingQuestion,
    MCQQuestion,
    TrueFalseQuestion,
)


@pytest.fixture
def mcq() -> MCQQuestion:
    return MCQQuestion(
        id="q_capital",
        prompt="What is the capital of France?",
        points=10,
        options=[
            ChoiceOption(id="o_paris", text="Paris", explanation="Paris has been the capital since 987."),
            ChoiceOption(id="o_london", text="London"),
            ChoiceOption(id="o_berlin", text="Berlin"),
            ChoiceOption(id="o_madrid", text="Madrid"),
            ChoiceOption(id="o_rome", text="Rome"),
        ],
        correct_answer_index=0,
    )


@pytest.fixture
def true_false() -> TrueFalseQuestion:
    return TrueFalseQuestion(
        id="q_sky",
        prompt="Is the sky blue on a clear day?",
        points=10,
        correct_answer=True,
        false_explanation="Rayleigh scattering makes it blue.",
    )


@pytest.fixture
def checkbox() -> CheckboxQuestion:
    return CheckboxQuestion(
        id="q_primes",
        prompt="Which of these are prime?",
        points=12,
        options=[
            ChoiceOption(id="a", text="2"),
            ChoiceOption(id="b", text="3"),
            ChoiceOption(id="c", text="5"),
            ChoiceOption(id="d", text="9"),
        ],
        correct_answers=["a", "b", "c"],
    )


@pytest.fixture
def essay() -> EssayQuestion:
    return EssayQuestion(
        id="q_essay",
        prompt="Describe the water cycle.",
        points=20,
        min_words=3,
        max_words=50,
    )


@pytest.fixture
def fill_blank() -> FillBlankQuestion:
    return FillBlankQuestion(
        id="q_fill",
        prompt="Complete the sentence.",
        question_text="___ is the capital of ___.",
        points=10,
        blanks=[
            Blank(id="b1", correct_answers=["Paris"], points=5),
            Blank(id="b2", correct_answers=["France"], points=5),
        ],
    )


@pytest.fixture
def matching() -> MatchingQuestion:
    return MatchingQuestion(
        id="q_match",
        prompt="Match each country to its capital.",
        points=10,
        left_column=[MatchingItem(id="l1", text="France"), MatchingItem(id="l2", text="Italy")],
        right_column=[MatchingItem(id="r1", text="Paris"), MatchingItem(id="r2", text="Rome")],
        pairs=[MatchingPair(left_id="l1", right_id="r1"), MatchingPair(left_id="l2", right_id="r2")],
    )


@pytest.fixture
def drag_drop() -> DragDropQuestion:
    return DragDropQuestion(
        id="q_drag",
        prompt="Sort the produce.",
        points=10,
        items=[
            DragItem(id="d1", text="Apple"),
            DragItem(id="d2", text="Banana"),
            DragItem(id="d3", text="Carrot"),
        ],
        zones=[DropZone(id="z1", label="Fruits"), DropZone(id="z2", label="Vegetables")],
        correct_answer={"z1": ["d1", "d2"], "z2": ["d3"]},
    )


@pytest.fixture
def code_input() -> CodeInputQuestion:
    return CodeInputQuestion(
        id="q_code",
        prompt="Read two integers and print their sum.",
        points=10,
        language="python",
        test_cases=[
            CodeTestCase(id="tc1", input="1 2", expected_output="3"),
            CodeTestCase(id="tc2", input="2 2", expected_output="4", hidden=True, points=3),
        ],
    )


@pytest.fixture
def all_questions(mcq, true_false, checkbox, essay, fill_blank, matching, drag_drop, code_input):
    return [mcq, true_false, checkbox, essay, fill_blank, matching, drag_drop, code_input]
