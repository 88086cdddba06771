from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.riasec import RiasecAnswer


class UserQuestionnaire(CamelModel):
    """Body of POST /match.

    Only riasec_answers and skills feed the score. The remaining fields are
    collected by the questionnaire form and passed through untouched.
    """
    riasec_answers: list[RiasecAnswer] = Field(..., max_length=500)
    skills: list[str] = Field(default=[], max_length=200)
    interests: list[str] = []
    education: str = ""
    desired_salary: float | None = None
    work_conditions: list[str] = []
