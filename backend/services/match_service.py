"""The match operation: questionnaire -> ranked professions.

Flow:
    UserQuestionnaire
      ├─ build_profile(riasec_answers, question bank)   → RiasecProfile
      └─ rank_professions(profile, skills, catalog)      → [ProfessionMatch]
                ↓
         MatchResult (all or nothing)
"""

import logging

from config import settings
from models.requests import UserQuestionnaire
from models.responses import MatchResult
from models.schemas.profession import ProfessionCatalog
from models.schemas.riasec import QuestionBank
from services.profession_matcher import rank_professions
from services.profile_builder import build_profile, require_complete

logger = logging.getLogger(__name__)


def match(
    questionnaire: UserQuestionnaire,
    question_bank: QuestionBank,
    catalog: ProfessionCatalog,
    riasec_weight: float | None = None,
) -> MatchResult:
    """Build the user's profile and rank the whole catalog against it.

    Interests, education, desired salary and work conditions travel with the
    questionnaire but do not change the score. Raises ValidationError and
    produces nothing on bad input.
    """
    answers = questionnaire.riasec_answers
    if settings.require_complete_answers:
        require_complete(answers, question_bank.questions)

    profile = build_profile(answers, question_bank.questions)
    matches = rank_professions(
        profile,
        questionnaire.skills,
        catalog.professions,
        riasec_weight=riasec_weight,
    )

    logger.info(
        "Matched questionnaire (%d answers, %d skills) against %d professions",
        len(answers), len(questionnaire.skills), len(matches),
    )
    return MatchResult(user_profile=profile, matches=matches)
