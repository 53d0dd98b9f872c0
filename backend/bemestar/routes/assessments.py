import logging

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..core.config import settings
from ..core.deps import checkup_repo, checkup_settings_repo, current_user
from ..models.assessment import Dass21Response, IasResponse
from ..models.checkup import CheckupRepo, CheckupSettingsRepo
from ..services.checkup import attach_ias, build_dass21_checkup
from ..services.dass21_report import dass21_recommendations, severity_label, severity_urgency
from ..services.validation import validate_dass21, validate_ias
from ..services.mental_health_paths import classify_mental_health
from ..services.scheduler import checkup_frequency_message
from ..services.scoring_ias import compute_ias, ias_description, ias_label, ias_percentage

logger = logging.getLogger(__name__)

router = APIRouter()


class Dass21Submit(BaseModel):
    responses: list[Dass21Response]


class IasSubmit(BaseModel):
    responses: list[IasResponse]


class CombinedSubmit(BaseModel):
    dass21: list[Dass21Response]
    ias: list[IasResponse]


@router.post("/dass21", summary="Aplicar e pontuar DASS-21")
async def dass21_submit(
    payload: Dass21Submit,
    user=Depends(current_user),
    repo: CheckupRepo = Depends(checkup_repo),
    settings_repo: CheckupSettingsRepo = Depends(checkup_settings_repo),
):
    validate_dass21(payload.responses)
    periodicity = await settings_repo.get(user["company_id"])
    record = build_dass21_checkup(payload.responses, periodicity)
    logger.debug("DASS-21 scores=%s", record.scores.model_dump())

    s = record.scores
    mental = classify_mental_health(s.depression, s.anxiety, s.stress)
    _id = await repo.save(user_id=user["sub"], company_id=user["company_id"], record=record)
    return {
        "assessment_id": _id,
        "checkup": record.model_dump(mode="json"),
        "severity_label": severity_label(record.severity_level),
        "urgency": severity_urgency(record.severity_level),
        "recommendations": dass21_recommendations(record.classifications),
        "mental_health": mental.model_dump(),
        "next_checkup_message": checkup_frequency_message(
            record.severity_level, record.next_checkup_date, now=record.date
        ),
    }


@router.post("/ias", summary="Pontuar IAS (sem persistir)")
async def ias_submit(payload: IasSubmit, user=Depends(current_user)):
    validate_ias(payload.responses)
    result = compute_ias(payload.responses)
    logger.debug("IAS total=%s", result.total_score)
    return {
        **result.model_dump(),
        "percentage": ias_percentage(result.total_score),
        "label": ias_label(result.classification),
        "description": ias_description(result.classification),
    }


@router.post("/combined", summary="Checkup completo: DASS-21 + IAS")
async def combined_submit(
    payload: CombinedSubmit,
    user=Depends(current_user),
    repo: CheckupRepo = Depends(checkup_repo),
    settings_repo: CheckupSettingsRepo = Depends(checkup_settings_repo),
):
    validate_dass21(payload.dass21)
    validate_ias(payload.ias)
    periodicity = await settings_repo.get(user["company_id"])
    record = attach_ias(build_dass21_checkup(payload.dass21, periodicity), payload.ias)

    _id = await repo.save(user_id=user["sub"], company_id=user["company_id"], record=record)
    if record.combined_psychologist_referral_needed:
        logger.info("checkup %s com encaminhamento psicológico (nível %s)", _id, record.combined_critical_level)
    return {"assessment_id": _id, "checkup": record.model_dump(mode="json")}


@router.get("/history", summary="Histórico de checkups (últimos)")
async def checkup_history(
    limit: int = Query(default=6, ge=1),
    user=Depends(current_user),
    repo: CheckupRepo = Depends(checkup_repo),
):
    return await repo.history(user_id=user["sub"], limit=min(limit, settings.HISTORY_MAX_LIMIT))
