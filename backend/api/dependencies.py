"""Shared dependencies for API routes."""

from models.schemas.profession import ProfessionCatalog
from models.schemas.riasec import QuestionBank
from services.catalog import get_profession_catalog, get_question_bank


def get_questions() -> QuestionBank:
    return get_question_bank()


def get_catalog() -> ProfessionCatalog:
    return get_profession_catalog()
