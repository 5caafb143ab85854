from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from careerfit.models import (
    DIMENSIONS,
    AssessmentResult,
    LikertQuestion,
    MultipleChoiceQuestion,
    Question,
    QuestionBank,
    ScenarioQuestion,
)
from careerfit.question_bank import default_question_bank
from careerfit.recommendations import (
    generate_career_matches,
    generate_insights,
    generate_next_steps,
    generate_skill_gaps,
)

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 70
UNMATCHED_SCENARIO_SCORE = 50


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (72.5 -> 73)."""
    return int(math.floor(value + 0.5))


def recommendation_for(confidence: float) -> str:
    if confidence >= 80:
        return "Yes"
    if confidence >= 60:
        return "Maybe"
    return "No"


def confidence_level(score: float) -> str:
    if score >= 85:
        return "Very High"
    if score >= 70:
        return "High"
    if score >= 55:
        return "Moderate"
    return "Developing"


def _scenario_contribution(question: ScenarioQuestion, answer: Any) -> float:
    score = question.choice_score(answer)
    return UNMATCHED_SCENARIO_SCORE if score is None else score * 10


def _multiple_choice_contribution(question: MultipleChoiceQuestion, answer: Any) -> float:
    # an answer missing from the option list scores like the first option
    index = question.options.index(answer) if answer in question.options else 0
    return (index + 1) / len(question.options) * 100


def _mean_or_neutral(total: float, count: int) -> int:
    return round_half_up(total / count) if count else NEUTRAL_SCORE


def dimension_score(answers: Mapping[str, Any], bank: QuestionBank, dimension: str) -> int:
    total = 0.0
    count = 0
    for question in bank.by_dimension(dimension):
        if question.id not in answers:
            continue
        answer = answers[question.id]
        if isinstance(question, LikertQuestion):
            total += answer * 20
        elif isinstance(question, ScenarioQuestion):
            total += _scenario_contribution(question, answer)
        else:
            total += NEUTRAL_SCORE
        count += 1
    return _mean_or_neutral(total, count)


def _section_contribution(question: Question, answer: Any) -> float:
    if isinstance(question, LikertQuestion):
        return answer * 20
    if isinstance(question, ScenarioQuestion):
        return _scenario_contribution(question, answer)
    if isinstance(question, MultipleChoiceQuestion):
        return _multiple_choice_contribution(question, answer)
    return 0.0


def section_score(answers: Mapping[str, Any], bank: QuestionBank, category: str) -> int:
    total = 0.0
    count = 0
    for question in bank.by_category(category):
        if question.id not in answers:
            continue
        # text answers count toward the divisor without adding to the total
        total += _section_contribution(question, answers[question.id])
        count += 1
    return _mean_or_neutral(total, count)


def compute_results(answers: Mapping[str, Any], bank: QuestionBank | None = None) -> AssessmentResult:
    bank = bank or default_question_bank()
    wiscar_scores = {dimension: dimension_score(answers, bank, dimension) for dimension in DIMENSIONS}
    psychometric = section_score(answers, bank, "psychometric")
    technical = section_score(answers, bank, "technical")

    wiscar_average = sum(wiscar_scores.values()) / len(wiscar_scores)
    overall_confidence = round_half_up((psychometric + technical + wiscar_average) / 3)
    recommendation = recommendation_for(overall_confidence)
    logger.debug(
        "Scored %d answers: confidence=%d recommendation=%s",
        len(answers),
        overall_confidence,
        recommendation,
    )

    return AssessmentResult(
        psychometric_score=psychometric,
        technical_score=technical,
        wiscar_scores=wiscar_scores,
        overall_confidence=overall_confidence,
        recommendation=recommendation,
        insights=generate_insights(wiscar_scores, psychometric, technical),
        next_steps=generate_next_steps(recommendation, wiscar_scores),
        career_matches=generate_career_matches(wiscar_scores, overall_confidence),
        skill_gaps=generate_skill_gaps(wiscar_scores, technical),
    )
