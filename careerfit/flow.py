from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from careerfit.models import AssessmentResult, Question, QuestionBank, Section
from careerfit.scoring import compute_results


class FlowError(RuntimeError):
    """Raised when the wizard cannot move on or has no question to answer."""


@dataclass
class AssessmentFlow:
    """Question-by-question wizard over a question bank.

    Position is a (section, question) pair of indices; answers accumulate in
    a plain dict keyed by question id. Sections without questions are skipped
    when moving in either direction.
    """

    bank: QuestionBank
    section_index: int = 0
    question_index: int = 0
    answers: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.current_question is None:
            self.section_index = self._first_section()

    @property
    def current_section(self) -> Section:
        return self.bank.sections[self.section_index]

    @property
    def current_question(self) -> Question | None:
        if not self.bank.sections:
            return None
        questions = self.current_section.questions
        if 0 <= self.question_index < len(questions):
            return questions[self.question_index]
        return None

    @property
    def current_answer(self) -> Any:
        question = self.current_question
        return self.answers.get(question.id) if question else None

    @property
    def total_questions(self) -> int:
        return self.bank.total_questions

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def progress(self) -> float:
        if not self.total_questions:
            return 0.0
        return self.answered_count / self.total_questions * 100.0

    @property
    def can_proceed(self) -> bool:
        question = self.current_question
        return question is not None and question.id in self.answers

    @property
    def is_first(self) -> bool:
        return self.question_index == 0 and self._next_section(self.section_index, -1) == self.section_index

    @property
    def is_last(self) -> bool:
        return (
            self.question_index == len(self.current_section.questions) - 1
            and self._next_section(self.section_index, 1) == self.section_index
        )

    def _first_section(self) -> int:
        return max(self._next_section(-1, 1), 0)

    def _next_section(self, start: int, step: int) -> int:
        """Index of the nearest non-empty section after ``start`` in ``step``
        direction, or ``start`` itself when there is none."""
        index = start + step
        while 0 <= index < len(self.bank.sections):
            if self.bank.sections[index].questions:
                return index
            index += step
        return start

    def record(self, value: Any) -> None:
        question = self.current_question
        if question is None:
            raise FlowError("question bank has no questions to answer")
        self.answers[question.id] = value

    def advance(self) -> AssessmentResult | None:
        """Move to the next question; return the results after the last one."""
        if not self.can_proceed:
            raise FlowError("current question must be answered before moving on")
        if self.question_index < len(self.current_section.questions) - 1:
            self.question_index += 1
            return None
        next_section = self._next_section(self.section_index, 1)
        if next_section != self.section_index:
            self.section_index = next_section
            self.question_index = 0
            return None
        return compute_results(self.answers, self.bank)

    def back(self) -> None:
        if self.question_index > 0:
            self.question_index -= 1
            return
        previous = self._next_section(self.section_index, -1)
        if previous != self.section_index:
            self.section_index = previous
            self.question_index = len(self.current_section.questions) - 1

    def reset(self) -> None:
        self.answers.clear()
        self.section_index = self._first_section()
        self.question_index = 0
