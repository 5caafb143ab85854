from __future__ import annotations

from typing import Any, Mapping

from careerfit.charts import dimension_label
from careerfit.models import AssessmentResult, QuestionBank
from careerfit.recommendations import RECOMMENDATION_LABELS
from careerfit.scoring import confidence_level


def export_payload(result: AssessmentResult, answers: Mapping[str, Any], bank: QuestionBank) -> dict:
    return {
        "role": bank.role,
        "assessment": {
            "psychometric_score": result.psychometric_score,
            "technical_score": result.technical_score,
            "wiscar_scores": dict(result.wiscar_scores),
            "overall_confidence": result.overall_confidence,
            "confidence_level": confidence_level(result.overall_confidence),
            "recommendation": result.recommendation,
            "recommendation_label": RECOMMENDATION_LABELS[result.recommendation],
            "insights": list(result.insights),
            "next_steps": list(result.next_steps),
            "career_matches": list(result.career_matches),
            "skill_gaps": list(result.skill_gaps),
        },
        "answers": [
            {
                "id": question.id,
                "section": question.category,
                "question": question.prompt,
                "answer": answers[question.id],
            }
            for question in bank.questions()
            if question.id in answers
        ],
    }


def share_summary(result: AssessmentResult, bank: QuestionBank) -> str:
    """Plain-text digest of a result for pasting into a message or post."""
    lines = [
        f"My {bank.role} career fit: {result.overall_confidence}% "
        f"({confidence_level(result.overall_confidence)} confidence)",
        f"Verdict: {RECOMMENDATION_LABELS[result.recommendation]}",
        f"Psychometric fit {result.psychometric_score}% | Technical readiness {result.technical_score}%",
        "WISCAR: " + ", ".join(f"{dimension_label(key)} {value}%" for key, value in result.wiscar_scores.items()),
        "Top career matches: " + ", ".join(result.career_matches[:3]),
    ]
    return "\n".join(lines)
