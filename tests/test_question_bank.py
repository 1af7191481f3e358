from interview_coach.core.question_bank import SECOND_SKILL_FALLBACK, build_question_bank
from interview_coach.models.profile import Profile
from interview_coach.models.question import QuestionCategory


def test_bank_shape(question_bank):
    assert len(question_bank.technical) == 5
    assert len(question_bank.behavioral) == 5
    assert [q.id for q in question_bank.technical] == [1, 2, 3, 4, 5]
    assert [q.id for q in question_bank.behavioral] == [1, 2, 3, 4, 5]
    assert all(q.category == QuestionCategory.TECHNICAL for q in question_bank.technical)
    assert all(q.category == QuestionCategory.BEHAVIORAL for q in question_bank.behavioral)


def test_technical_questions_interpolate_profile(question_bank):
    prompts = [q.prompt for q in question_bank.technical]
    assert "Python" in prompts[0]
    assert "SQL" in prompts[1]
    assert "Software Engineer" in prompts[2]
    assert "Software Engineer" in question_bank.technical[4].ideal_answer


def test_second_skill_fallback():
    bank = build_question_bank(Profile(job_title="UX Designer", skills=["Figma"]))
    assert SECOND_SKILL_FALLBACK in bank.technical[1].prompt


def test_flatten_orders_technical_before_behavioral(question_bank):
    flat = question_bank.flatten()
    assert len(flat) == len(question_bank) == 10
    assert flat[:5] == question_bank.technical
    assert flat[5:] == question_bank.behavioral


def test_bank_is_deterministic(profile):
    assert build_question_bank(profile) == build_question_bank(profile)


def test_every_question_has_answer_and_tip(question_bank):
    for question in question_bank.flatten():
        assert question.ideal_answer
        assert question.tip
