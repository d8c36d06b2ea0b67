from __future__ import annotations


class QuizEngineError(Exception):
    """Base class for misuse of the quiz aggregate or registry.

    Validation problems and rejected submissions are never raised; they come
    back as lists of messages. These exceptions cover calls that cannot
    produce a meaningful value at all.
    """


class UnknownQuestionType(QuizEngineError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"Unknown question type: {value!r}")
        self.value = value


class QuestionNotFoundError(QuizEngineError, KeyError):
    def __init__(self, question_id: str):
        super().__init__(question_id)
        self.question_id = question_id

    def __str__(self) -> str:
        return f"Question not found: {self.question_id}"


class DuplicateQuestionError(QuizEngineError, ValueError):
    def __init__(self, question_id: str):
        super().__init__(f"Question id already in quiz: {question_id}")
        self.question_id = question_id


class ReorderError(QuizEngineError, ValueError):
    pass


class DraftNotValidError(QuizEngineError):
    def __init__(self, errors: list[str]):
        super().__init__("Question draft is not valid: " + "; ".join(errors or ["not checked"]))
        self.errors = list(errors or [])
