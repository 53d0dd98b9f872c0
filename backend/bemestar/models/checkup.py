# bemestar/models/checkup.py
"""
Registro de checkup (DASS-21 + IAS opcional) e repositórios Mongo
para resultados e configuração de periodicidade por empresa.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from anyio import to_thread
from pydantic import BaseModel, ConfigDict
from pymongo import ReturnDocument

from .assessment import CheckupSettings, Dass21Classification, Dass21Response, Dass21Scores, IasResponse
from ..services.typing import CriticalLevel, IasClassification, Severity

logger = logging.getLogger(__name__)


class CheckupRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime
    responses: List[Dass21Response]
    scores: Dass21Scores
    classifications: Dass21Classification
    overall_score: int  # média das três subescalas
    severity_level: Severity
    next_checkup_date: datetime
    # IAS
    ias_responses: Optional[List[IasResponse]] = None
    ias_total_score: Optional[int] = None
    ias_classification: Optional[IasClassification] = None
    # avaliação combinada
    combined_recommended_paths: Optional[List[str]] = None
    combined_psychologist_referral_needed: Optional[bool] = None
    combined_justification: Optional[str] = None
    combined_critical_level: Optional[CriticalLevel] = None
    combined_recommendations: Optional[List[str]] = None


class CheckupRepo:
    def __init__(self, db) -> None:
        self.col = db["checkups"]

    async def save(self, user_id: str, company_id: Optional[str], record: CheckupRecord) -> str:
        doc = {
            "user_id": user_id,
            "company_id": company_id,
            **record.model_dump(),
            "created_at": datetime.now(timezone.utc),
        }

        def _insert():
            res = self.col.insert_one(doc)
            return str(res.inserted_id)

        inserted_id = await to_thread.run_sync(_insert)
        logger.info("checkup %s salvo (severity=%s)", inserted_id, record.severity_level)
        return inserted_id

    async def history(self, user_id: str, limit: int = 6) -> list[dict]:
        def _fetch():
            cur = self.col.find({"user_id": user_id}).sort("date", -1).limit(limit)
            return [{**d, "_id": str(d["_id"])} for d in cur]

        return await to_thread.run_sync(_fetch)


class CheckupSettingsRepo:
    """Uma configuração por empresa; sem documento, vale o default da app."""

    def __init__(self, db, default: CheckupSettings) -> None:
        self.col = db["checkup_settings"]
        self.default = default

    async def get(self, company_id: Optional[str]) -> CheckupSettings:
        if not company_id:
            return self.default

        def _find() -> Optional[Dict[str, Any]]:
            return self.col.find_one({"company_id": company_id})

        doc = await to_thread.run_sync(_find)
        if not doc:
            return self.default
        return CheckupSettings.model_validate(doc)

    async def upsert(self, company_id: str, settings: CheckupSettings) -> CheckupSettings:
        now = datetime.now(timezone.utc)

        def _update() -> Dict[str, Any]:
            return self.col.find_one_and_update(
                {"company_id": company_id},
                {
                    "$set": {**settings.model_dump(), "updated_at": now},
                    "$setOnInsert": {"company_id": company_id, "created_at": now},
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )

        doc = await to_thread.run_sync(_update)
        logger.info(
            "periodicidade da empresa %s: normal=%s severo=%s",
            company_id, settings.normal_interval_days, settings.severe_interval_days,
        )
        return CheckupSettings.model_validate(doc)
