"""Tests for the learner-facing presentation order."""

from quiz_engine import new_quiz, presentation_view, score
from quiz_engine.schemas import MCQSubmission


def test_shuffled_mcq_still_scores_the_same_choice(mcq) -> None:
    quiz = new_quiz("Geography", questions=[mcq], shuffle_options=True)
    orders = set()
    for seed in range(20):
        q = presentation_view(quiz, seed=seed).questions[0]
        orders.add(tuple(o.id for o in q.options))
        assert q.options[q.correct_answer_index].text == "Paris"
        assert score(q, MCQSubmission(selected_index=q.correct_answer_index)).correct is True
    assert len(orders) > 1


def test_same_seed_same_order(mcq, true_false, checkbox, matching) -> None:
    quiz = new_quiz("Mixed", questions=[mcq, true_false, checkbox, matching], shuffle_questions=True, shuffle_options=True)
    assert presentation_view(quiz, seed=7) == presentation_view(quiz, seed=7)


def test_question_setting_overrides_quiz_setting(mcq) -> None:
    pinned = mcq.model_copy(update={"shuffle_options": False})
    quiz = new_quiz("Geography", questions=[pinned], shuffle_options=True)
    for seed in range(5):
        assert presentation_view(quiz, seed=seed).questions[0].options == pinned.options


def test_shuffle_questions_keeps_the_set(mcq, true_false, essay) -> None:
    quiz = new_quiz("Mixed", questions=[mcq, true_false, essay], shuffle_questions=True)
    view = presentation_view(quiz, seed=3)
    assert sorted(q.id for q in view.questions) == sorted(q.id for q in quiz.questions)
    assert [q.id for q in quiz.questions] == ["q_capital", "q_sky", "q_essay"]
