"""Domain types shared by the matching core, catalog loaders and API."""

from models.schemas.profession import Profession, ProfessionCatalog
from models.schemas.riasec import (
    RIASEC_ORDER,
    QuestionBank,
    RiasecAnswer,
    RiasecCategory,
    RiasecProfile,
    RiasecQuestion,
)

__all__ = [
    "RIASEC_ORDER",
    "QuestionBank",
    "RiasecAnswer",
    "RiasecCategory",
    "RiasecProfile",
    "RiasecQuestion",
    "Profession",
    "ProfessionCatalog",
]
