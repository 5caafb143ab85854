"""Loading and validation of the declarative question bank.

The bank is a JSON document with a ``role`` title and an ordered list of
``sections``. Each section carries its ``key`` (the question category), a
display ``title`` and its ordered ``questions``. Question entries are tagged by
``type`` and carry only the fields their type needs.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from careerfit.config import question_bank_path
from careerfit.models import (
    CATEGORIES,
    DIMENSIONS,
    QUESTION_TYPES,
    LikertQuestion,
    MultipleChoiceQuestion,
    Question,
    QuestionBank,
    ScenarioOption,
    ScenarioQuestion,
    Section,
    TextQuestion,
)

logger = logging.getLogger(__name__)

_TYPE_ONLY_FIELDS = {
    "multiple-choice": {"options"},
    "scenario": {"situation", "choices"},
}


class QuestionBankError(ValueError):
    """Raised when a question bank document does not match the data model."""


def _require_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise QuestionBankError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _require_list(item: dict[str, Any], key: str, where: str) -> list[Any]:
    value = item.get(key, [])
    if not isinstance(value, list):
        raise QuestionBankError(f"{where}: '{key}' must be a list")
    return value


def _require_str(item: dict[str, Any], key: str, where: str) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value.strip():
        raise QuestionBankError(f"{where}: '{key}' must be a non-empty string")
    return value


def _parse_choices(raw: Any, where: str) -> tuple[ScenarioOption, ...]:
    if not isinstance(raw, list) or not raw:
        raise QuestionBankError(f"{where}: scenario questions need a non-empty 'choices' list")
    choices: list[ScenarioOption] = []
    seen: set[str] = set()
    for position, entry in enumerate(raw):
        entry = _require_object(entry, f"{where} choice #{position + 1}")
        choice_id = _require_str(entry, "id", where)
        if choice_id in seen:
            raise QuestionBankError(f"{where}: duplicate choice id '{choice_id}'")
        seen.add(choice_id)
        score = entry.get("score")
        if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= 10:
            raise QuestionBankError(f"{where}: choice '{choice_id}' score must be an integer 0-10")
        choices.append(ScenarioOption(id=choice_id, text=_require_str(entry, "text", where), score=score))
    return tuple(choices)


def _parse_question(item: dict[str, Any], category: str) -> Question:
    question_id = _require_str(item, "id", f"section '{category}'")
    where = f"question '{question_id}'"
    qtype = item.get("type")
    if qtype not in QUESTION_TYPES:
        raise QuestionBankError(f"{where}: unknown type {qtype!r}")

    for other_type, fields in _TYPE_ONLY_FIELDS.items():
        if other_type != qtype:
            stray = sorted(fields & item.keys())
            if stray:
                raise QuestionBankError(f"{where}: {', '.join(stray)} only allowed on {other_type} questions")

    dimension = item.get("dimension")
    if dimension is not None and dimension not in DIMENSIONS:
        raise QuestionBankError(f"{where}: unknown dimension {dimension!r}")

    common = {
        "id": question_id,
        "prompt": _require_str(item, "prompt", where),
        "category": category,
        "dimension": dimension,
        "description": item.get("description"),
    }
    if qtype == "likert":
        return LikertQuestion(**common)
    if qtype == "multiple-choice":
        options = item.get("options")
        if not isinstance(options, list) or not options or not all(isinstance(o, str) for o in options):
            raise QuestionBankError(f"{where}: multiple-choice questions need a non-empty 'options' list")
        return MultipleChoiceQuestion(options=tuple(options), **common)
    if qtype == "scenario":
        return ScenarioQuestion(
            situation=_require_str(item, "situation", where),
            choices=_parse_choices(item.get("choices"), where),
            **common,
        )
    return TextQuestion(**common)


def parse_question_bank(raw: Any) -> QuestionBank:
    raw = _require_object(raw, "question bank")
    sections: list[Section] = []
    seen_ids: set[str] = set()
    for position, entry in enumerate(_require_list(raw, "sections", "question bank")):
        entry = _require_object(entry, f"section #{position + 1}")
        key = entry.get("key")
        if key not in CATEGORIES:
            raise QuestionBankError(f"unknown section key {key!r}")
        questions = []
        for index, item in enumerate(_require_list(entry, "questions", f"section '{key}'")):
            item = _require_object(item, f"section '{key}' question #{index + 1}")
            question = _parse_question(item, key)
            if question.id in seen_ids:
                raise QuestionBankError(f"question '{question.id}': duplicate id")
            seen_ids.add(question.id)
            questions.append(question)
        sections.append(Section(key=key, title=entry.get("title") or key.title(), questions=tuple(questions)))
    return QuestionBank(role=raw.get("role", ""), sections=tuple(sections))


def load_question_bank(path: Path | None = None) -> QuestionBank:
    source = path or question_bank_path()
    with Path(source).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    bank = parse_question_bank(raw)
    logger.info("Loaded %d questions in %d sections from %s", bank.total_questions, len(bank.sections), source)
    return bank


@lru_cache(maxsize=1)
def default_question_bank() -> QuestionBank:
    return load_question_bank()
