from __future__ import annotations

from typing import Callable, Dict, List, Union

from .errors import UnknownQuestionType
from .schemas import (
    BaseQuestion,
    ChoiceOption,
    CheckboxQuestion,
    CodeInputQuestion,
    CodeTestCase,
    DragDropQuestion,
    DragItem,
    DropZone,
    EssayQuestion,
    FillBlankQuestion,
    MatchingItem,
    MatchingQuestion,
    MCQQuestion,
    QuestionType,
    TrueFalseQuestion,
)
from .utils import new_id


QUESTION_TYPES: List[Dict[str, str]] = [
    {"value": "MCQ", "label": "Multiple Choice", "description": "Single correct answer from multiple options"},
    {"value": "TRUE_FALSE", "label": "True/False", "description": "Simple true or false question"},
    {"value": "CHECKBOX", "label": "Multiple Selection", "description": "Multiple correct answers"},
    {"value": "ESSAY", "label": "Essay", "description": "Long text answer"},
    {"value": "FILL_BLANK", "label": "Fill in the Blank", "description": "Complete the sentence"},
    {"value": "MATCHING", "label": "Matching", "description": "Match items from two columns"},
    {"value": "DRAG_DROP", "label": "Drag & Drop", "description": "Place items into the correct zones"},
    {"value": "CODE_INPUT", "label": "Code Input", "description": "Programming question with code editor"},
]


def resolve_type(value: Union[QuestionType, str]) -> QuestionType:
    if isinstance(value, QuestionType):
        return value
    try:
        return QuestionType(str(value).strip().upper())
    except ValueError:
        raise UnknownQuestionType(value) from None


def type_info(value: Union[QuestionType, str]) -> Dict[str, str]:
    qtype = resolve_type(value)
    return next(t for t in QUESTION_TYPES if t["value"] == qtype.value)


def _options(n: int, prefix: str) -> List[ChoiceOption]:
    return [ChoiceOption(id=new_id(prefix), text="") for _ in range(n)]


def _default_mcq() -> MCQQuestion:
    return MCQQuestion(options=_options(2, "mcq"), correct_answer_index=0)


def _default_true_false() -> TrueFalseQuestion:
    return TrueFalseQuestion(correct_answer=True)


def _default_checkbox() -> CheckboxQuestion:
    return CheckboxQuestion(options=_options(3, "cb"), correct_answers=[])


def _default_essay() -> EssayQuestion:
    return EssayQuestion()


def _default_fill_blank() -> FillBlankQuestion:
    return FillBlankQuestion(question_text="", blanks=[])


def _default_matching() -> MatchingQuestion:
    left = [MatchingItem(id=new_id("left")) for _ in range(2)]
    right = [MatchingItem(id=new_id("right")) for _ in range(2)]
    return MatchingQuestion(left_column=left, right_column=right, pairs=[])


def _default_drag_drop() -> DragDropQuestion:
    items = [DragItem(id=new_id("drag"), correct_position=i + 1) for i in range(3)]
    return DragDropQuestion(items=items, zones=[DropZone(id=new_id("zone"))], correct_answer={})


def _default_code_input() -> CodeInputQuestion:
    return CodeInputQuestion(
        language="python",
        test_cases=[CodeTestCase(id=new_id("tc"), description="Basic test case")],
        time_limit=30,
        memory_limit=128,
    )


_FACTORIES: Dict[QuestionType, Callable[[], BaseQuestion]] = {
    QuestionType.MCQ: _default_mcq,
    QuestionType.TRUE_FALSE: _default_true_false,
    QuestionType.CHECKBOX: _default_checkbox,
    QuestionType.ESSAY: _default_essay,
    QuestionType.FILL_BLANK: _default_fill_blank,
    QuestionType.MATCHING: _default_matching,
    QuestionType.DRAG_DROP: _default_drag_drop,
    QuestionType.CODE_INPUT: _default_code_input,
}


def create_default(question_type: Union[QuestionType, str]) -> BaseQuestion:
    """Return an empty skeleton for a new question of the given type.

    The skeleton is not expected to pass validation: option texts, answer
    keys and prompts are left for the author to fill in.
    """
    return _FACTORIES[resolve_type(question_type)]()
