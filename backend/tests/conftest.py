"""Shared test configuration, fixtures and pytest markers."""

import pytest

from models.schemas.profession import Profession
from models.schemas.riasec import RIASEC_ORDER, RiasecAnswer, RiasecProfile, RiasecQuestion
from services.catalog import clear as clear_catalog


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture(autouse=True)
def _reset_catalog():
    """Drop cached reference data around each test."""
    clear_catalog()
    yield
    clear_catalog()


@pytest.fixture
def one_per_category() -> list[RiasecQuestion]:
    """Six questions, ids 1-6, one per category in RIASEC order."""
    return [
        RiasecQuestion(id=i + 1, text=f"{category.value} question", category=category)
        for i, category in enumerate(RIASEC_ORDER)
    ]


@pytest.fixture
def answers_for():
    """Build answers from a {question_id: score} mapping."""
    def _build(scores: dict[int, int]) -> list[RiasecAnswer]:
        return [RiasecAnswer(question_id=qid, score=score) for qid, score in scores.items()]
    return _build


@pytest.fixture
def make_profession():
    """Factory for catalog entries with sensible defaults."""
    def _make(id: int, profile: dict[str, float] | None = None, skills: list[str] | None = None,
              name: str | None = None) -> Profession:
        return Profession(
            id=id,
            name=name or f"Profession {id}",
            skills=skills or [],
            riasec_profile=RiasecProfile(**(profile or {})),
            avg_salary=50000,
            demand_score=50,
            work_type="on-site",
            education_required="Bachelor's degree",
        )
    return _make
