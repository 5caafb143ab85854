from __future__ import annotations

from typing import Mapping

RECOMMENDATION_LABELS = {
    "Yes": "Ready to Pursue",
    "Maybe": "Develop & Pursue",
    "No": "Explore Alternatives",
}

NO_GAPS_MESSAGE = "No major skill gaps identified. You're well-prepared!"

FALLBACK_INSIGHT = "Shows potential with areas for development"

NEXT_STEPS = {
    "Yes": (
        "Consider advanced digital strategy certification",
        "Seek mentorship from current digital strategy leaders",
        "Start building a portfolio of strategic initiatives",
    ),
    "Maybe": (
        "Focus on developing identified skill gaps",
        "Gain experience through digital marketing roles",
        "Complete foundational courses in data analytics",
    ),
    "No": (
        "Explore related fields like digital marketing or business analysis",
        "Build foundational skills in data and technology",
        "Consider starting with coordinator or specialist roles",
    ),
}

FALLBACK_CAREERS = ("Digital Marketing Specialist", "Business Analyst")

# (score key, threshold, gap); gaps are reported when the score is below threshold
SKILL_GAP_RULES = (
    ("technical", 70, "Digital analytics and measurement"),
    ("skill", 70, "Stakeholder management and communication"),
    ("cognitive", 70, "Strategic thinking and problem-solving"),
    ("ability", 70, "Learning agility and adaptability"),
)


def generate_insights(
    wiscar_scores: Mapping[str, int], psychometric_score: int, technical_score: int
) -> list[str]:
    insights: list[str] = []
    if wiscar_scores["will"] >= 80:
        insights.append("Strong motivation and commitment to leadership roles")
    if wiscar_scores["interest"] >= 80:
        insights.append("High enthusiasm for digital strategy and innovation")
    if technical_score >= 80:
        insights.append("Solid technical foundation for strategic decision-making")
    if psychometric_score >= 80:
        insights.append("Personality traits align well with leadership demands")
    return insights or [FALLBACK_INSIGHT]


def generate_next_steps(recommendation: str, wiscar_scores: Mapping[str, int]) -> list[str]:
    # The list depends on the recommendation alone; wiscar_scores is unused.
    return list(NEXT_STEPS.get(recommendation, NEXT_STEPS["No"]))


def generate_career_matches(wiscar_scores: Mapping[str, int], overall_confidence: int) -> list[str]:
    matches: list[str] = []
    if overall_confidence >= 80:
        matches.extend(["Digital Strategy Manager", "Digital Transformation Lead"])
    if wiscar_scores["interest"] >= 75:
        matches.extend(["Growth Marketing Manager", "Digital Product Manager"])
    if wiscar_scores["cognitive"] >= 75:
        matches.extend(["Business Intelligence Manager", "Data Strategy Consultant"])
    return matches or list(FALLBACK_CAREERS)


def generate_skill_gaps(wiscar_scores: Mapping[str, int], technical_score: int) -> list[str]:
    scores = {**wiscar_scores, "technical": technical_score}
    return [gap for key, threshold, gap in SKILL_GAP_RULES if scores[key] < threshold]
