from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Iterator, Mapping, Union

CATEGORIES = ("introduction", "psychometric", "technical", "wiscar")
DIMENSIONS = ("will", "interest", "skill", "cognitive", "ability", "real_world_fit")
QUESTION_TYPES = ("likert", "multiple-choice", "scenario", "text")
RECOMMENDATIONS = ("Yes", "Maybe", "No")


@dataclass(frozen=True)
class ScenarioOption:
    id: str
    text: str
    score: int


@dataclass(frozen=True)
class LikertQuestion:
    id: str
    prompt: str
    category: str
    dimension: str | None = None
    description: str | None = None

    type: ClassVar[str] = "likert"


@dataclass(frozen=True)
class MultipleChoiceQuestion:
    id: str
    prompt: str
    category: str
    options: tuple[str, ...]
    dimension: str | None = None
    description: str | None = None

    type: ClassVar[str] = "multiple-choice"


@dataclass(frozen=True)
class ScenarioQuestion:
    id: str
    prompt: str
    category: str
    situation: str
    choices: tuple[ScenarioOption, ...]
    dimension: str | None = None
    description: str | None = None

    type: ClassVar[str] = "scenario"

    def choice_score(self, choice_id: object) -> int | None:
        for choice in self.choices:
            if choice.id == choice_id:
                return choice.score
        return None


@dataclass(frozen=True)
class TextQuestion:
    id: str
    prompt: str
    category: str
    dimension: str | None = None
    description: str | None = None

    type: ClassVar[str] = "text"


Question = Union[LikertQuestion, MultipleChoiceQuestion, ScenarioQuestion, TextQuestion]


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    questions: tuple[Question, ...]


@dataclass(frozen=True)
class QuestionBank:
    role: str
    sections: tuple[Section, ...]

    def questions(self) -> Iterator[Question]:
        for section in self.sections:
            yield from section.questions

    def by_dimension(self, dimension: str) -> list[Question]:
        return [q for q in self.questions() if q.dimension == dimension]

    def by_category(self, category: str) -> list[Question]:
        return [q for q in self.questions() if q.category == category]

    def get(self, question_id: str) -> Question | None:
        for question in self.questions():
            if question.id == question_id:
                return question
        return None

    @property
    def total_questions(self) -> int:
        return sum(len(section.questions) for section in self.sections)


@dataclass(frozen=True)
class AssessmentResult:
    """Scores and guidance for one completed assessment.

    Collections are frozen on construction: ``wiscar_scores`` becomes a
    read-only mapping and the text lists become tuples.
    """

    psychometric_score: int
    technical_score: int
    wiscar_scores: Mapping[str, int]
    overall_confidence: int
    recommendation: str
    insights: tuple[str, ...]
    next_steps: tuple[str, ...]
    career_matches: tuple[str, ...]
    skill_gaps: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "wiscar_scores", MappingProxyType(dict(self.wiscar_scores)))
        for name in ("insights", "next_steps", "career_matches", "skill_gaps"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
