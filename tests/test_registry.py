"""Tests for the question type registry and default skeletons."""

import pytest

from quiz_engine import QUESTION_TYPES, create_default, resolve_type, type_info, validate
from quiz_engine.errors import UnknownQuestionType
from quiz_engine.schemas import QuestionType


def test_registry_lists_every_type_once() -> None:
    values = [t["value"] for t in QUESTION_TYPES]
    assert values == [t.value for t in QuestionType]
    assert all(t["label"] and t["description"] for t in QUESTION_TYPES)


@pytest.mark.parametrize("qtype", [t.value for t in QuestionType])
def test_default_has_requested_type(qtype: str) -> None:
    q = create_default(qtype)
    assert q.type == qtype
    assert q.points == 10


def test_resolve_type_is_case_insensitive() -> None:
    assert resolve_type("fill_blank") is QuestionType.FILL_BLANK
    assert resolve_type(QuestionType.MCQ) is QuestionType.MCQ
    assert type_info("mcq")["label"] == "Multiple Choice"


def test_unknown_type_raises() -> None:
    with pytest.raises(UnknownQuestionType) as exc:
        create_default("POLL")
    assert exc.value.value == "POLL"


def test_default_shapes() -> None:
    assert len(create_default("MCQ").options) == 2
    cb = create_default("CHECKBOX")
    assert len(cb.options) == 3 and cb.correct_answers == []
    m = create_default("MATCHING")
    assert len(m.left_column) == 2 and len(m.right_column) == 2
    dd = create_default("DRAG_DROP")
    assert len(dd.items) == 3 and len(dd.zones) == 1
    code = create_default("CODE_INPUT")
    assert code.language == "python" and len(code.test_cases) == 1
    assert code.time_limit == 30 and code.memory_limit == 128


def test_defaults_get_fresh_ids() -> None:
    a, b = create_default("MCQ"), create_default("MCQ")
    assert a.id != b.id
    assert {o.id for o in a.options}.isdisjoint({o.id for o in b.options})


def test_default_mcq_needs_option_text() -> None:
    errors = validate(create_default("MCQ"))
    assert "Question prompt is required" in errors
    assert "At least 2 options must have text" in errors
