from __future__ import annotations

import pytest

from careerfit.models import (
    DIMENSIONS,
    AssessmentResult,
    LikertQuestion,
    MultipleChoiceQuestion,
    QuestionBank,
    ScenarioOption,
    ScenarioQuestion,
    Section,
    TextQuestion,
)
from careerfit.question_bank import default_question_bank
from careerfit.scoring import (
    compute_results,
    confidence_level,
    dimension_score,
    recommendation_for,
    round_half_up,
    section_score,
)


def _bank(*questions) -> QuestionBank:
    by_category: dict[str, list] = {}
    for question in questions:
        by_category.setdefault(question.category, []).append(question)
    return QuestionBank(
        role="Test Role",
        sections=tuple(Section(key=key, title=key.title(), questions=tuple(qs)) for key, qs in by_category.items()),
    )


def _scenario(question_id: str, category: str, dimension: str | None = None) -> ScenarioQuestion:
    return ScenarioQuestion(
        id=question_id,
        prompt="What do you do?",
        category=category,
        dimension=dimension,
        situation="Something happened.",
        choices=(
            ScenarioOption(id="best", text="Best move", score=10),
            ScenarioOption(id="ok", text="Fine move", score=6),
            ScenarioOption(id="poor", text="Poor move", score=2),
        ),
    )


def _best_answers(bank: QuestionBank) -> dict:
    answers = {}
    for question in bank.questions():
        if isinstance(question, LikertQuestion):
            answers[question.id] = 5
        elif isinstance(question, MultipleChoiceQuestion):
            answers[question.id] = question.options[-1]
        elif isinstance(question, ScenarioQuestion):
            answers[question.id] = max(question.choices, key=lambda c: c.score).id
    return answers


@pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
def test_likert_contributes_value_times_twenty(value):
    bank = _bank(LikertQuestion(id="q", prompt="?", category="psychometric", dimension="will"))
    assert dimension_score({"q": value}, bank, "will") == value * 20
    assert section_score({"q": value}, bank, "psychometric") == value * 20


def test_scenario_contributes_choice_score_times_ten():
    bank = _bank(_scenario("s", "technical", "real_world_fit"))
    assert dimension_score({"s": "ok"}, bank, "real_world_fit") == 60
    assert section_score({"s": "poor"}, bank, "technical") == 20


def test_unknown_scenario_choice_contributes_fifty():
    bank = _bank(_scenario("s", "technical", "real_world_fit"))
    assert dimension_score({"s": "nope"}, bank, "real_world_fit") == 50
    assert section_score({"s": "nope"}, bank, "technical") == 50


def test_other_types_contribute_flat_seventy_to_dimension():
    bank = _bank(
        MultipleChoiceQuestion(id="mc", prompt="?", category="wiscar", dimension="will", options=("a", "b")),
        TextQuestion(id="t", prompt="?", category="wiscar", dimension="will"),
        LikertQuestion(id="l", prompt="?", category="psychometric", dimension="will"),
    )
    assert dimension_score({"mc": "a", "t": "free text"}, bank, "will") == 70
    assert dimension_score({"mc": "b", "l": 5}, bank, "will") == 85


def test_dimension_without_questions_scores_seventy():
    bank = _bank(
        LikertQuestion(id="l", prompt="?", category="psychometric"),
        _scenario("s", "technical"),
    )
    answers = {"l": 5, "s": "best"}
    for dimension in DIMENSIONS:
        assert dimension_score(answers, bank, dimension) == 70


def test_unanswered_questions_are_excluded():
    bank = _bank(
        LikertQuestion(id="a", prompt="?", category="psychometric", dimension="skill"),
        LikertQuestion(id="b", prompt="?", category="psychometric", dimension="skill"),
    )
    assert dimension_score({}, bank, "skill") == 70
    assert dimension_score({"a": 2}, bank, "skill") == 40
    assert section_score({"b": 4}, bank, "psychometric") == 80


def test_multiple_choice_scores_by_option_position():
    bank = _bank(
        MultipleChoiceQuestion(id="mc", prompt="?", category="technical", options=("a", "b", "c", "d", "e"))
    )
    assert section_score({"mc": "a"}, bank, "technical") == 20
    assert section_score({"mc": "c"}, bank, "technical") == 60
    assert section_score({"mc": "e"}, bank, "technical") == 100


def test_multiple_choice_unknown_answer_scores_like_first_option():
    bank = _bank(
        MultipleChoiceQuestion(id="mc", prompt="?", category="technical", options=("a", "b", "c", "d", "e"))
    )
    assert section_score({"mc": "zzz"}, bank, "technical") == section_score({"mc": "a"}, bank, "technical")


def test_text_answer_counts_without_adding_to_section():
    bank = _bank(
        LikertQuestion(id="l", prompt="?", category="technical"),
        TextQuestion(id="t", prompt="?", category="technical"),
    )
    assert section_score({"l": 5, "t": "notes"}, bank, "technical") == 50


def test_section_ignores_other_categories():
    bank = _bank(
        LikertQuestion(id="p", prompt="?", category="psychometric"),
        LikertQuestion(id="t", prompt="?", category="technical"),
    )
    assert section_score({"p": 1, "t": 5}, bank, "technical") == 100


def test_round_half_up():
    assert round_half_up(72.5) == 73
    assert round_half_up(2.5) == 3
    assert round_half_up(72.49) == 72
    assert round_half_up(70) == 70


@pytest.mark.parametrize(
    "confidence, expected",
    [(100, "Yes"), (80, "Yes"), (79, "Maybe"), (60, "Maybe"), (59, "No"), (0, "No")],
)
def test_recommendation_bands(confidence, expected):
    assert recommendation_for(confidence) == expected


@pytest.mark.parametrize(
    "score, expected",
    [(85, "Very High"), (84, "High"), (70, "High"), (69, "Moderate"), (55, "Moderate"), (54, "Developing")],
)
def test_confidence_levels(score, expected):
    assert confidence_level(score) == expected


def test_empty_answers_score_neutral():
    result = compute_results({})
    assert result.psychometric_score == 70
    assert result.technical_score == 70
    assert set(result.wiscar_scores) == set(DIMENSIONS)
    assert all(score == 70 for score in result.wiscar_scores.values())
    assert result.overall_confidence == 70
    assert result.recommendation == "Maybe"
    assert result.insights == ("Shows potential with areas for development",)
    assert result.skill_gaps == ()
    assert result.career_matches == ("Digital Marketing Specialist", "Business Analyst")


def test_best_answers_recommend_yes():
    bank = default_question_bank()
    result = compute_results(_best_answers(bank), bank)
    assert result.psychometric_score == 100
    assert result.technical_score == 100
    # will and ability each mix a likert 5 with a multiple-choice (flat 70)
    assert result.wiscar_scores["will"] == 85
    assert result.wiscar_scores["ability"] == 85
    assert result.overall_confidence == 98
    assert result.overall_confidence >= 80
    assert result.recommendation == "Yes"
    assert result.skill_gaps == ()
    assert len(result.insights) == 4


def test_overall_confidence_uses_unrounded_wiscar_average():
    bank = default_question_bank()
    result = compute_results({"psych_leadership": 4, "tech_scenario": "budget"}, bank)
    wiscar_average = sum(result.wiscar_scores.values()) / 6
    expected = round_half_up((result.psychometric_score + result.technical_score + wiscar_average) / 3)
    assert result.wiscar_scores["will"] == 80
    assert result.psychometric_score == 80
    assert result.technical_score == 30
    assert result.overall_confidence == expected == 61
    assert result.recommendation == "Maybe"


def test_low_answers_recommend_no():
    bank = default_question_bank()
    answers = {}
    for question in bank.questions():
        if isinstance(question, LikertQuestion):
            answers[question.id] = 1
        elif isinstance(question, MultipleChoiceQuestion):
            answers[question.id] = question.options[0]
        elif isinstance(question, ScenarioQuestion):
            answers[question.id] = min(question.choices, key=lambda c: c.score).id
    result = compute_results(answers, bank)
    assert result.overall_confidence < 60
    assert result.recommendation == "No"
    assert "Digital analytics and measurement" in result.skill_gaps


def test_scoring_is_idempotent():
    bank = default_question_bank()
    answers = {"psych_leadership": 3, "tech_analytics": "CAC to CLV Ratio", "wiscar_stakeholder": "risk"}
    assert compute_results(answers, bank) == compute_results(dict(answers), bank)


def test_results_cannot_be_changed_in_place():
    result = compute_results({})
    with pytest.raises(TypeError):
        result.wiscar_scores["will"] = 0
    with pytest.raises(AttributeError):
        result.insights.append("extra")
    with pytest.raises(AttributeError):
        result.skill_gaps.clear()
    assert result.wiscar_scores["will"] == 70
    assert result.insights == ("Shows potential with areas for development",)


def test_results_freeze_caller_collections():
    scores = {dimension: 90 for dimension in DIMENSIONS}
    gaps = ["Learning agility and adaptability"]
    result = AssessmentResult(
        psychometric_score=90,
        technical_score=90,
        wiscar_scores=scores,
        overall_confidence=90,
        recommendation="Yes",
        insights=[],
        next_steps=[],
        career_matches=[],
        skill_gaps=gaps,
    )
    scores["will"] = 0
    gaps.append("Digital analytics and measurement")
    assert result.wiscar_scores["will"] == 90
    assert result.skill_gaps == ("Learning agility and adaptability",)
