from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from .questions import QuizModel


class MCQSubmission(QuizModel):
    type: Literal["MCQ"] = "MCQ"
    selected_index: Optional[int] = None
    selected_option_id: Optional[str] = None


class TrueFalseSubmission(QuizModel):
    type: Literal["TRUE_FALSE"] = "TRUE_FALSE"
    answer: Optional[bool] = None


class CheckboxSubmission(QuizModel):
    type: Literal["CHECKBOX"] = "CHECKBOX"
    selected_option_ids: List[str] = Field(default_factory=list)


class EssaySubmission(QuizModel):
    type: Literal["ESSAY"] = "ESSAY"
    text: str = ""


class FillBlankSubmission(QuizModel):
    type: Literal["FILL_BLANK"] = "FILL_BLANK"
    answers: Dict[str, str] = Field(default_factory=dict)


class SubmittedPair(QuizModel):
    left_id: str
    right_id: str


class MatchingSubmission(QuizModel):
    type: Literal["MATCHING"] = "MATCHING"
    pairs: List[SubmittedPair] = Field(default_factory=list)


class DragDropSubmission(QuizModel):
    type: Literal["DRAG_DROP"] = "DRAG_DROP"
    placements: Dict[str, List[str]] = Field(default_factory=dict)


class CodeInputSubmission(QuizModel):
    type: Literal["CODE_INPUT"] = "CODE_INPUT"
    code: str = ""
    language: Optional[str] = None


Submission = Annotated[
    Union[
        MCQSubmission,
        TrueFalseSubmission,
        CheckboxSubmission,
        EssaySubmission,
        FillBlankSubmission,
        MatchingSubmission,
        DragDropSubmission,
        CodeInputSubmission,
    ],
    Field(discriminator="type"),
]

_submission_adapter: TypeAdapter = TypeAdapter(Submission)


def parse_submission(data) -> QuizModel:
    if isinstance(data, QuizModel):
        return data
    return _submission_adapter.validate_python(data)


ScoreStatus = Literal["graded", "pending", "rejected"]


class ScoreResult(QuizModel):
    status: ScoreStatus = "graded"
    correct: Optional[bool] = None
    score: Optional[float] = None
    max_score: float = 0
    feedback: Optional[str] = None
    errors: List[str] = Field(default_factory=list)
    details: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_graded(self) -> bool:
        return self.status == "graded"


class TestCaseResult(QuizModel):
    """Verdict for one test case, produced by an external code judge."""

    __test__ = False  # not a pytest class

    test_case_id: str
    passed: bool
    output: str = ""
    error: Optional[str] = None
    execution_time: Optional[float] = None


class JudgeRequest(QuizModel):
    question_id: str
    language: str
    code: str
    test_cases: List[Dict[str, Any]] = Field(default_factory=list)
    time_limit: Optional[int] = None
    memory_limit: Optional[int] = None
