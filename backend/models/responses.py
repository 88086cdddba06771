from models.schemas.base import CamelModel
from models.schemas.profession import Profession
from models.schemas.riasec import RiasecProfile


class ProfessionMatch(CamelModel):
    profession: Profession
    match_percentage: float = 0.0
    riasec_match: float = 0.0
    skills_match: float = 0.0


class MatchResult(CamelModel):
    """Ranked matches, highest match_percentage first."""
    user_profile: RiasecProfile
    matches: list[ProfessionMatch] = []


class HealthResponse(CamelModel):
    status: str = "ok"
    question_bank_version: str = ""
    catalog_version: str = ""
    professions: int = 0
