from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from ..settings import DEFAULT_PASSING_SCORE
from ..utils import new_id, utcnow
from .questions import Question, QuizModel, effective_points


class QuizSettings(QuizModel):
    # misspelled setting names are errors, not silently dropped
    model_config = ConfigDict(extra="forbid")

    time_limit: Optional[int] = Field(default=None, description="minutes")
    passing_score: int = DEFAULT_PASSING_SCORE
    shuffle_questions: bool = False
    shuffle_options: bool = False
    show_answers_after: bool = True
    allow_retake: bool = True
    max_attempts: Optional[int] = None


class Quiz(QuizModel):
    """Ordered questions plus settings. Frozen: every change goes through
    `quiz_engine.quiz` and yields a new value."""

    id: str = Field(default_factory=lambda: new_id("quiz"))
    title: str = ""
    description: Optional[str] = None
    questions: List[Question] = Field(default_factory=list)
    settings: QuizSettings = Field(default_factory=QuizSettings)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def total_points(self) -> int:
        return sum(effective_points(q) for q in self.questions)

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    def get_question(self, question_id: str):
        for q in self.questions:
            if q.id == question_id:
                return q
        return None
