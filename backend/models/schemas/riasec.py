"""RIASEC question bank and profile types."""

from enum import Enum

from pydantic import ConfigDict, StrictInt

from models.schemas.base import CamelModel


class RiasecCategory(str, Enum):
    """Holland's six vocational personality types."""
    REALISTIC = "realistic"
    INVESTIGATIVE = "investigative"
    ARTISTIC = "artistic"
    SOCIAL = "social"
    ENTERPRISING = "enterprising"
    CONVENTIONAL = "conventional"


# Fixed axis order for vector maths
RIASEC_ORDER: tuple[RiasecCategory, ...] = tuple(RiasecCategory)


class RiasecQuestion(CamelModel):
    id: int
    text: str
    category: RiasecCategory


class RiasecAnswer(CamelModel):
    question_id: int
    score: StrictInt  # Likert 1-5, range checked by the profile builder


class RiasecProfile(CamelModel):
    """Six RIASEC components on a 0-100 scale.

    Used both for a user's derived profile and a profession's target profile,
    so the two live in the same coordinate space.
    """
    model_config = ConfigDict(frozen=True)

    realistic: float = 0.0
    investigative: float = 0.0
    artistic: float = 0.0
    social: float = 0.0
    enterprising: float = 0.0
    conventional: float = 0.0

    def get(self, category: RiasecCategory) -> float:
        return getattr(self, category.value)

    def as_vector(self) -> list[float]:
        """Components in RIASEC_ORDER."""
        return [self.get(c) for c in RIASEC_ORDER]

    @classmethod
    def from_scores(cls, scores: dict[RiasecCategory, float]) -> "RiasecProfile":
        return cls(**{c.value: scores.get(c, 0.0) for c in RIASEC_ORDER})


class QuestionBank(CamelModel):
    version: str = ""
    questions: list[RiasecQuestion] = []
