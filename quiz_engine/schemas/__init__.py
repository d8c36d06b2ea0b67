from .questions import (
    QuestionType,
    SUPPORTED_LANGUAGES,
    QuizModel,
    ChoiceOption,
    GradingCriterion,
    Blank,
    MatchingItem,
    MatchingPair,
    DragItem,
    DropZone,
    CodeTestCase,
    BaseQuestion,
    MCQQuestion,
    TrueFalseQuestion,
    CheckboxQuestion,
    EssayQuestion,
    FillBlankQuestion,
    MatchingQuestion,
    DragDropQuestion,
    CodeInputQuestion,
    Question,
    parse_question,
    effective_points,
)
from .submissions import (
    MCQSubmission,
    TrueFalseSubmission,
    CheckboxSubmission,
    EssaySubmission,
    FillBlankSubmission,
    SubmittedPair,
    MatchingSubmission,
    DragDropSubmission,
    CodeInputSubmission,
    Submission,
    parse_submission,
    ScoreResult,
    TestCaseResult,
    JudgeRequest,
)
from .quiz import Quiz, QuizSettings

__all__ = [
    "QuestionType",
    "SUPPORTED_LANGUAGES",
    "QuizModel",
    "ChoiceOption",
    "GradingCriterion",
    "Blank",
    "MatchingItem",
    "MatchingPair",
    "DragItem",
    "DropZone",
    "CodeTestCase",
    "BaseQuestion",
    "MCQQuestion",
    "TrueFalseQuestion",
    "CheckboxQuestion",
    "EssayQuestion",
    "FillBlankQuestion",
    "MatchingQuestion",
    "DragDropQuestion",
    "CodeInputQuestion",
    "Question",
    "parse_question",
    "effective_points",
    "MCQSubmission",
    "TrueFalseSubmission",
    "CheckboxSubmission",
    "EssaySubmission",
    "FillBlankSubmission",
    "SubmittedPair",
    "MatchingSubmission",
    "DragDropSubmission",
    "CodeInputSubmission",
    "Submission",
    "parse_submission",
    "ScoreResult",
    "TestCaseResult",
    "JudgeRequest",
    "Quiz",
    "QuizSettings",
]
