"""
Montagem do registro de checkup que a API persiste.
Orquestra os motores; não faz I/O.
"""
from datetime import datetime, timezone
from typing import Iterable, Optional

from .combined_assessment import compose_assessment
from .scheduler import next_checkup_date
from .scoring_dass21 import classify_scores, compute_scores, highest_severity, overall_score
from .scoring_ias import compute_ias
from ..models.assessment import CheckupSettings, Dass21Response, IasResponse
from ..models.checkup import CheckupRecord


def build_dass21_checkup(
    responses: Iterable[Dass21Response],
    settings: CheckupSettings,
    now: Optional[datetime] = None,
) -> CheckupRecord:
    responses = list(responses)
    scores = compute_scores(responses)
    classifications = classify_scores(scores)
    severity = highest_severity(classifications)
    taken_at = now or datetime.now(timezone.utc)
    return CheckupRecord(
        date=taken_at,
        responses=responses,
        scores=scores,
        classifications=classifications,
        overall_score=overall_score(scores),
        severity_level=severity,
        next_checkup_date=next_checkup_date(severity, settings, now=taken_at),
    )


def attach_ias(record: CheckupRecord, ias_responses: Iterable[IasResponse]) -> CheckupRecord:
    """Devolve uma cópia do registro com IAS e avaliação combinada."""
    ias_responses = list(ias_responses)
    ias = compute_ias(ias_responses)
    combined = compose_assessment(record.scores, record.classifications, ias)
    return record.model_copy(
        update={
            "ias_responses": ias_responses,
            "ias_total_score": ias.total_score,
            "ias_classification": ias.classification,
            "combined_recommended_paths": combined.recommended_paths,
            "combined_psychologist_referral_needed": combined.psychologist_referral_needed,
            "combined_justification": combined.justification,
            "combined_critical_level": combined.critical_level,
            "combined_recommendations": combined.recommendations,
        }
    )
