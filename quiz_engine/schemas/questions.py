from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from ..settings import DEFAULT_POINTS
from ..utils import new_id, utcnow


class QuestionType(str, Enum):
    MCQ = "MCQ"
    TRUE_FALSE = "TRUE_FALSE"
    CHECKBOX = "CHECKBOX"
    ESSAY = "ESSAY"
    FILL_BLANK = "FILL_BLANK"
    MATCHING = "MATCHING"
    DRAG_DROP = "DRAG_DROP"
    CODE_INPUT = "CODE_INPUT"


Difficulty = Literal["easy", "medium", "hard"]

SUPPORTED_LANGUAGES = (
    "javascript",
    "python",
    "java",
    "cpp",
    "c",
    "csharp",
    "php",
    "ruby",
    "go",
    "rust",
)


class QuizModel(BaseModel):
    """Shared config: camelCase on the wire, snake_case in Python. Values are
    frozen; changes are made with `model_copy(update=...)`."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# building blocks
# ---------------------------------------------------------------------------
class ChoiceOption(QuizModel):
    id: str = Field(default_factory=lambda: new_id("opt"))
    text: str = ""
    image: Optional[str] = None
    explanation: Optional[str] = None


class GradingCriterion(QuizModel):
    id: str = Field(default_factory=lambda: new_id("crit"))
    name: str = ""
    description: Optional[str] = None
    max_points: int = 10
    weight: float = 1.0


class Blank(QuizModel):
    id: str = Field(default_factory=lambda: new_id("blank"))
    correct_answers: List[str] = Field(default_factory=list)
    case_sensitive: bool = False
    exact_match: bool = False
    points: int = 1
    hints: List[str] = Field(default_factory=list)
    placeholder: Optional[str] = None


class MatchingItem(QuizModel):
    id: str = Field(default_factory=lambda: new_id("item"))
    text: str = ""
    image: Optional[str] = None


class MatchingPair(QuizModel):
    left_id: str
    right_id: str
    explanation: Optional[str] = None


class DragItem(QuizModel):
    id: str = Field(default_factory=lambda: new_id("drag"))
    text: str = ""
    image: Optional[str] = None
    correct_position: int = 0


class DropZone(QuizModel):
    id: str = Field(default_factory=lambda: new_id("zone"))
    label: str = ""
    capacity: Optional[int] = None
    required: bool = False


class CodeTestCase(QuizModel):
    id: str = Field(default_factory=lambda: new_id("tc"))
    input: str = ""
    expected_output: str = ""
    hidden: bool = False
    description: Optional[str] = None
    points: Optional[int] = None


# ---------------------------------------------------------------------------
# question variants
# ---------------------------------------------------------------------------
class BaseQuestion(QuizModel):
    id: str = Field(default_factory=lambda: new_id("q"))
    prompt: str = ""
    instructions: Optional[str] = None
    points: int = DEFAULT_POINTS
    explanation: Optional[str] = None
    hints: List[str] = Field(default_factory=list)
    difficulty: Difficulty = "medium"
    tags: List[str] = Field(default_factory=list)
    time_limit: Optional[int] = Field(default=None, description="seconds")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class MCQQuestion(BaseQuestion):
    type: Literal["MCQ"] = "MCQ"
    options: List[ChoiceOption] = Field(default_factory=list)
    correct_answer_index: int = 0
    shuffle_options: Optional[bool] = None
    allow_partial_credit: bool = False
    show_explanation: bool = True


class TrueFalseQuestion(BaseQuestion):
    type: Literal["TRUE_FALSE"] = "TRUE_FALSE"
    correct_answer: bool = True
    true_explanation: Optional[str] = None
    false_explanation: Optional[str] = None
    show_explanation: bool = True


class CheckboxQuestion(BaseQuestion):
    type: Literal["CHECKBOX"] = "CHECKBOX"
    options: List[ChoiceOption] = Field(default_factory=list)
    correct_answers: List[str] = Field(default_factory=list)
    min_selections: Optional[int] = None
    max_selections: Optional[int] = None
    exact_selections: Optional[int] = None
    shuffle_options: Optional[bool] = None
    allow_partial_credit: bool = True
    penalize_incorrect: bool = False
    show_explanation: bool = True


class EssayQuestion(BaseQuestion):
    type: Literal["ESSAY"] = "ESSAY"
    min_words: Optional[int] = None
    max_words: Optional[int] = None
    sample_answer: Optional[str] = None
    grading_criteria: List[GradingCriterion] = Field(default_factory=list)
    allow_rich_text: bool = False


class FillBlankQuestion(BaseQuestion):
    type: Literal["FILL_BLANK"] = "FILL_BLANK"
    question_text: str = ""
    blanks: List[Blank] = Field(default_factory=list)
    show_explanation: bool = True


class MatchingQuestion(BaseQuestion):
    type: Literal["MATCHING"] = "MATCHING"
    left_column: List[MatchingItem] = Field(default_factory=list)
    right_column: List[MatchingItem] = Field(default_factory=list)
    pairs: List[MatchingPair] = Field(default_factory=list)
    shuffle_items: bool = True


class DragDropQuestion(BaseQuestion):
    type: Literal["DRAG_DROP"] = "DRAG_DROP"
    items: List[DragItem] = Field(default_factory=list)
    zones: List[DropZone] = Field(default_factory=list)
    correct_answer: Dict[str, List[str]] = Field(default_factory=dict)
    shuffle_items: bool = True


class CodeInputQuestion(BaseQuestion):
    type: Literal["CODE_INPUT"] = "CODE_INPUT"
    language: str = "python"
    starter_code: Optional[str] = None
    solution_code: Optional[str] = None
    test_cases: List[CodeTestCase] = Field(default_factory=list)
    time_limit: Optional[int] = Field(default=30, description="seconds per run")
    memory_limit: int = Field(default=128, description="MB")


Question = Annotated[
    Union[
        MCQQuestion,
        TrueFalseQuestion,
        CheckboxQuestion,
        EssayQuestion,
        FillBlankQuestion,
        MatchingQuestion,
        DragDropQuestion,
        CodeInputQuestion,
    ],
    Field(discriminator="type"),
]

_question_adapter: TypeAdapter = TypeAdapter(Question)


def parse_question(data) -> BaseQuestion:
    """Build the right question variant from a dict (camelCase or snake_case keys)."""
    if isinstance(data, BaseQuestion):
        return data
    return _question_adapter.validate_python(data)


def effective_points(question: BaseQuestion) -> int:
    """Max points a question is worth; fill-in-the-blank uses the sum of its blanks."""
    if isinstance(question, FillBlankQuestion) and question.blanks:
        return sum(int(b.points) for b in question.blanks)
    return int(question.points)
