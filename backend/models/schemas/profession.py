"""Profession catalog types."""

from models.schemas.base import CamelModel
from models.schemas.riasec import RiasecProfile


class Profession(CamelModel):
    id: int
    name: str
    description: str = ""
    skills: list[str] = []
    riasec_profile: RiasecProfile
    avg_salary: float = 0.0
    demand_score: float = 0.0  # 0-100
    work_type: str = ""
    education_required: str = ""


class ProfessionCatalog(CamelModel):
    version: str = ""
    professions: list[Profession] = []
