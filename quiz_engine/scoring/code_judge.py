from __future__ import annotations

from typing import Dict, Iterable

from ..logging import get_logger
from ..schemas import (
    CodeInputQuestion,
    CodeInputSubmission,
    JudgeRequest,
    ScoreResult,
    TestCaseResult,
)
from .matchers import graded

logger = get_logger("scoring.judge")


def build_judge_request(q: CodeInputQuestion, sub: CodeInputSubmission) -> JudgeRequest:
    """Everything an external runner needs to execute the learner's code.

    Running the code is not done here; the judge sends back one
    `TestCaseResult` per test case and `score_judge_results` turns those into
    a score.
    """
    return JudgeRequest(
        question_id=q.id,
        language=sub.language or q.language,
        code=sub.code,
        test_cases=[
            {"id": tc.id, "input": tc.input, "expectedOutput": tc.expected_output, "hidden": tc.hidden}
            for tc in q.test_cases
        ],
        time_limit=q.time_limit,
        memory_limit=q.memory_limit,
    )


def score_judge_results(q: CodeInputQuestion, results: Iterable[TestCaseResult]) -> ScoreResult:
    by_id: Dict[str, TestCaseResult] = {}
    for r in results:
        if not isinstance(r, TestCaseResult):
            r = TestCaseResult.model_validate(r)
        by_id[r.test_case_id] = r

    total_weight = 0
    passed_weight = 0
    passed = 0
    for tc in q.test_cases:
        weight = tc.points or 1
        total_weight += weight
        res = by_id.get(tc.id)
        if res is not None and res.passed:
            passed_weight += weight
            passed += 1

    earned = q.points * passed_weight / total_weight if total_weight else 0
    correct = bool(q.test_cases) and passed == len(q.test_cases)
    logger.thinking("code_input id=%s passed=%d/%d -> %.2f", q.id, passed, len(q.test_cases), earned)
    return graded(q.points, earned, correct, details={"passed": passed, "total": len(q.test_cases)})
