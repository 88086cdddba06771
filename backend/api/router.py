import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_catalog, get_questions
from config import settings
from models.requests import UserQuestionnaire
from models.responses import HealthResponse, MatchResult
from models.schemas.profession import Profession, ProfessionCatalog
from models.schemas.riasec import QuestionBank, RiasecQuestion
from services import match_service
from services.catalog import find_professions
from services.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health", response_model=HealthResponse)
async def health(
    questions: QuestionBank = Depends(get_questions),
    catalog: ProfessionCatalog = Depends(get_catalog),
):
    return HealthResponse(
        status="ok",
        question_bank_version=questions.version,
        catalog_version=catalog.version,
        professions=len(catalog.professions),
    )


@router.get("/questions", response_model=list[RiasecQuestion])
async def list_questions(questions: QuestionBank = Depends(get_questions)):
    return questions.questions


@router.get("/professions", response_model=list[Profession])
async def list_professions(catalog: ProfessionCatalog = Depends(get_catalog)):
    return catalog.professions


@router.get("/professions/{profession_id}", response_model=Profession)
async def get_profession(profession_id: int, catalog: ProfessionCatalog = Depends(get_catalog)):
    found, _ = find_professions(catalog, [profession_id])
    if not found:
        raise HTTPException(status_code=404, detail=f"Profession {profession_id} not found")
    return found[0]


@router.get("/compare", response_model=list[Profession])
async def compare_professions(
    ids: str = Query(..., description="Comma-separated profession ids"),
    catalog: ProfessionCatalog = Depends(get_catalog),
):
    try:
        wanted = [int(part) for part in ids.split(",") if part.strip()]
    except ValueError:
        raise HTTPException(status_code=400, detail="ids must be a comma-separated list of integers")
    if not wanted:
        raise HTTPException(status_code=400, detail="At least one profession id is required")

    found, unknown = find_professions(catalog, wanted)
    if unknown:
        raise HTTPException(status_code=404, detail=f"Unknown profession ids: {unknown}")
    return found


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.match_rate_limit)
async def match(
    request: Request,
    body: UserQuestionnaire,
    questions: QuestionBank = Depends(get_questions),
    catalog: ProfessionCatalog = Depends(get_catalog),
):
    try:
        return match_service.match(body, questions, catalog)
    except ValidationError as e:
        logger.warning("Rejected questionnaire: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
