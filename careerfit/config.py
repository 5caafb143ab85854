from __future__ import annotations

import logging
import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
DEFAULT_QUESTION_BANK_PATH = ROOT_DIR / "data" / "question_bank.json"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def question_bank_path() -> Path:
    override = os.getenv("CAREERFIT_QUESTION_BANK")
    return Path(override) if override else DEFAULT_QUESTION_BANK_PATH


def configure_logging(level: str | None = None) -> None:
    level_name = (level or os.getenv("CAREERFIT_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
