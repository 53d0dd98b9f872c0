# bemestar/models/assessment.py
"""
Schemas do DASS-21, IAS e da avaliação combinada.
O cálculo fica nos services (mais fácil de testar); aqui só os registros.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..services.typing import CriticalLevel, IasClassification, Severity


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------- Entradas ----------
class Dass21Response(_Frozen):
    question_id: int
    value: int


class IasResponse(_Frozen):
    question_id: int
    value: int


# ---------- DASS-21 ----------
class Dass21Scores(_Frozen):
    # 0..42 por subescala (soma * 2)
    stress: int
    anxiety: int
    depression: int


class Dass21Classification(_Frozen):
    stress: Severity
    anxiety: Severity
    depression: Severity


# ---------- IAS ----------
class IasResult(_Frozen):
    total_score: int
    classification: IasClassification
    recommendations: list[str]


# ---------- Trilhas / combinado ----------
class MentalHealthClassificationResult(_Frozen):
    recommended_paths: list[str]
    psychologist_referral_needed: bool
    justification: str
    critical_level: CriticalLevel
    recommendations: list[str]


class Dass21Snapshot(_Frozen):
    scores: Dass21Scores
    classifications: Dass21Classification
    overall_score: int
    severity_level: Severity


class CombinedAssessmentResult(_Frozen):
    dass21: Dass21Snapshot
    ias: IasResult
    recommended_paths: list[str]
    psychologist_referral_needed: bool
    justification: str
    critical_level: CriticalLevel
    recommendations: list[str]


# ---------- Configuração de checkup ----------
class CheckupSettings(_Frozen):
    normal_interval_days: int = Field(ge=1, le=365)
    severe_interval_days: int = Field(ge=1, le=90)
    auto_reminders_enabled: bool = True

    @model_validator(mode="after")
    def _severe_is_shorter(self) -> "CheckupSettings":
        # casos severos precisam voltar antes dos normais
        if self.severe_interval_days >= self.normal_interval_days:
            raise ValueError("Intervalo para casos severos deve ser menor que o intervalo normal")
        return self
