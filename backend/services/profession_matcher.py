"""Profession matcher: rank the catalog against a RIASEC profile.

Per profession:
- riasec_match: Euclidean distance in [0,100]^6, inverted to a 0-100 similarity
- skills_match: share of the profession's skills the user listed
- match_percentage: riasec_weight * riasec_match + (1 - riasec_weight) * skills_match

Ranking is match_percentage desc, riasec_match desc, profession id asc.
"""

import logging
import math
from collections.abc import Iterable, Sequence

import numpy as np

from config import settings
from models.responses import ProfessionMatch
from models.schemas.profession import Profession
from models.schemas.riasec import RIASEC_ORDER, RiasecProfile
from services.errors import ValidationError

logger = logging.getLogger(__name__)

PROFILE_MIN = 0.0
PROFILE_MAX = 100.0
MAX_DISTANCE = math.sqrt(len(RIASEC_ORDER) * (PROFILE_MAX - PROFILE_MIN) ** 2)  # sqrt(6) * 100


def _normalize_skills(skills: Iterable[str]) -> set[str]:
    """Lowercase, strip, drop blanks."""
    return {s.strip().lower() for s in skills if s and s.strip()}


def _validate_profile(profile: RiasecProfile) -> None:
    for value in profile.as_vector():
        if not math.isfinite(value) or not PROFILE_MIN <= value <= PROFILE_MAX:
            raise ValidationError(
                f"Profile components must be within [{PROFILE_MIN:g}, {PROFILE_MAX:g}], got {value}"
            )


def _distances_to_similarity(distances: np.ndarray) -> np.ndarray:
    return np.clip(100.0 * (1.0 - distances / MAX_DISTANCE), 0.0, 100.0)


def riasec_similarity(a: RiasecProfile, b: RiasecProfile) -> float:
    """Distance-based similarity between two profiles, 0-100."""
    distance = np.linalg.norm(np.array(a.as_vector()) - np.array(b.as_vector()))
    return float(_distances_to_similarity(np.array([distance]))[0])


def skills_similarity(user_skills: Iterable[str], required_skills: Iterable[str]) -> float:
    """Percentage of required skills the user has. 100 when nothing is required."""
    required = _normalize_skills(required_skills)
    if not required:
        return 100.0
    user = _normalize_skills(user_skills)
    return 100.0 * len(required & user) / len(required)


def rank_professions(
    profile: RiasecProfile,
    skills: Iterable[str],
    professions: Sequence[Profession],
    riasec_weight: float | None = None,
) -> list[ProfessionMatch]:
    """Score every profession and return them best first.

    Raises ValidationError for an empty catalog, a profile component outside
    0-100, or a weight outside 0-1.
    """
    if not professions:
        raise ValidationError("Profession catalog is empty")
    _validate_profile(profile)

    weight = settings.riasec_weight if riasec_weight is None else riasec_weight
    if not 0.0 <= weight <= 1.0:
        raise ValidationError(f"riasec_weight must be within [0, 1], got {weight}")

    user_skills = _normalize_skills(skills)

    # One vectorised pass over the catalog
    user_vec = np.array(profile.as_vector(), dtype=float)
    catalog = np.array([p.riasec_profile.as_vector() for p in professions], dtype=float)
    riasec_scores = _distances_to_similarity(np.linalg.norm(catalog - user_vec, axis=1))

    matches: list[ProfessionMatch] = []
    for profession, riasec_score in zip(professions, riasec_scores):
        riasec_match = float(riasec_score)
        skills_match = skills_similarity(user_skills, profession.skills)
        matches.append(ProfessionMatch(
            profession=profession,
            match_percentage=weight * riasec_match + (1.0 - weight) * skills_match,
            riasec_match=riasec_match,
            skills_match=skills_match,
        ))

    matches.sort(key=lambda m: (-m.match_percentage, -m.riasec_match, m.profession.id))

    if matches:
        top = matches[0]
        logger.debug(
            "Ranked %d professions, top: %s (%.1f%%)",
            len(matches), top.profession.name, top.match_percentage,
        )
    return matches
