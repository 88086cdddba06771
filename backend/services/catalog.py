"""Question bank and profession catalog providers.

Both are read from JSON under settings.data_dir on first use and kept as a
process-wide snapshot. Callers treat them as read-only.
"""

import json
import logging
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from config import settings
from models.schemas.profession import Profession, ProfessionCatalog
from models.schemas.riasec import RIASEC_ORDER, QuestionBank
from services.errors import CatalogError

logger = logging.getLogger(__name__)

# Lazy-loaded snapshots
_question_bank: QuestionBank | None = None
_profession_catalog: ProfessionCatalog | None = None


def _read_json(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Reference data file not found: {path}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}")


def _check_unique_ids(ids: Sequence[int], what: str, path: Path) -> None:
    dupes = sorted(i for i, n in Counter(ids).items() if n > 1)
    if dupes:
        raise CatalogError(f"Duplicate {what} ids in {path}: {dupes}")


def load_question_bank(path: Path) -> QuestionBank:
    """Read and validate a question bank file."""
    try:
        bank = QuestionBank.model_validate(_read_json(path))
    except PydanticValidationError as e:
        raise CatalogError(f"Malformed question bank {path}: {e}")

    if not bank.questions:
        raise CatalogError(f"Question bank {path} has no questions")
    _check_unique_ids([q.id for q in bank.questions], "question", path)

    covered = {q.category for q in bank.questions}
    uncovered = [c.value for c in RIASEC_ORDER if c not in covered]
    if uncovered:
        logger.warning("Question bank %s has no questions for: %s", path, ", ".join(uncovered))

    logger.info("Loaded question bank %s (%d questions) from %s", bank.version, len(bank.questions), path)
    return bank


def _check_profession(profession: Profession, path: Path) -> None:
    for value in profession.riasec_profile.as_vector():
        if not 0.0 <= value <= 100.0:
            raise CatalogError(
                f"Profession {profession.id} in {path} has RIASEC component {value} outside [0, 100]"
            )
    if not 0.0 <= profession.demand_score <= 100.0:
        raise CatalogError(
            f"Profession {profession.id} in {path} has demandScore {profession.demand_score} outside [0, 100]"
        )


def load_profession_catalog(path: Path) -> ProfessionCatalog:
    """Read and validate a profession catalog file."""
    try:
        catalog = ProfessionCatalog.model_validate(_read_json(path))
    except PydanticValidationError as e:
        raise CatalogError(f"Malformed profession catalog {path}: {e}")

    if not catalog.professions:
        raise CatalogError(f"Profession catalog {path} is empty")
    _check_unique_ids([p.id for p in catalog.professions], "profession", path)
    for profession in catalog.professions:
        _check_profession(profession, path)

    logger.info(
        "Loaded profession catalog %s (%d professions) from %s",
        catalog.version, len(catalog.professions), path,
    )
    return catalog


def get_question_bank() -> QuestionBank:
    """Return the question bank, loading it on first call."""
    global _question_bank
    if _question_bank is None:
        _question_bank = load_question_bank(Path(settings.data_dir) / settings.questions_file)
    return _question_bank


def get_profession_catalog() -> ProfessionCatalog:
    """Return the profession catalog, loading it on first call."""
    global _profession_catalog
    if _profession_catalog is None:
        _profession_catalog = load_profession_catalog(Path(settings.data_dir) / settings.professions_file)
    return _profession_catalog


def find_professions(catalog: ProfessionCatalog, ids: Sequence[int]) -> tuple[list[Profession], list[int]]:
    """Look up professions by id, keeping request order.

    Returns (found, unknown_ids).
    """
    by_id = {p.id: p for p in catalog.professions}
    found = [by_id[i] for i in ids if i in by_id]
    unknown = [i for i in ids if i not in by_id]
    return found, unknown


def clear() -> None:
    """Drop cached reference data. Useful for testing."""
    global _question_bank, _profession_catalog
    _question_bank = None
    _profession_catalog = None
