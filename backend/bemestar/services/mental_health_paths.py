"""
Classificador de trilhas de saúde mental.

Converte as três pontuações do DASS-21 em trilhas de conteúdo. Os cortes
aqui são regras de negócio das trilhas e NÃO coincidem com as faixas
clínicas de `scoring_dass21`.

Cada dimensão cai em um de três níveis: Alerta, Moderado ou Manutenção.
A seleção das trilhas é "tudo ou nada" entre dimensões: havendo qualquer
Alerta, só as trilhas de Alerta entram; senão, só as de Moderado; senão,
a trilha de manutenção. O nível "alto" nunca é produzido aqui; ele só
aparece quando a avaliação combinada traz o IAS para a conta.
"""
from dataclasses import dataclass
from typing import Literal

from .typing import CriticalLevel, unique
from ..models.assessment import MentalHealthClassificationResult

Tier = Literal["alerta", "moderado", "manutencao"]

MAINTENANCE_PATH = "Trilha Manutenção da SM"


@dataclass(frozen=True)
class _Dimension:
    name: str
    alert_at: int
    moderate_at: int
    alert_path: str
    moderate_path: str
    alert_rec: str
    moderate_rec: str


DEPRESSION = _Dimension(
    name="Depressão",
    alert_at=21,
    moderate_at=14,
    alert_path="Trilha Depressão Alerta",
    moderate_path="Trilha Depressão Moderado",
    alert_rec="Busque apoio psicológico imediatamente para tratar sintomas depressivos severos.",
    moderate_rec="Considere buscar apoio profissional e adote práticas de autocuidado para sintomas depressivos.",
)

STRESS = _Dimension(
    name="Estresse",
    alert_at=26,
    moderate_at=19,
    alert_path="Trilha Estresse Alerta",
    moderate_path="Trilha Estresse Moderado",
    alert_rec="Procure apoio psicológico imediato para manejo de estresse severo.",
    moderate_rec="Implemente técnicas de relaxamento e considere apoio profissional para manejo do estresse.",
)

ANXIETY = _Dimension(
    name="Ansiedade",
    alert_at=15,
    moderate_at=10,
    alert_path="Trilha Ansiedade Alerta",
    moderate_path="Trilha Ansiedade Moderado",
    alert_rec="Busque ajuda psicológica urgente para tratamento de sintomas ansiosos severos.",
    moderate_rec="Pratique técnicas de respiração e relaxamento, considere apoio profissional.",
)

GENERAL_RECOMMENDATIONS: dict[CriticalLevel, list[str]] = {
    "crítico": [
        "⚠️ URGENTE: Procure ajuda psicológica imediatamente.",
        "Evite tomar decisões importantes sozinho neste momento.",
        "Mantenha contato próximo com familiares e amigos.",
    ],
    "moderado": [
        "Considere buscar apoio profissional preventivo.",
        "Adote práticas regulares de autocuidado e bem-estar.",
        "Monitore seus sintomas e procure ajuda se piorarem.",
    ],
    "baixo": [
        "Continue mantendo hábitos saudáveis de vida.",
        "Pratique exercícios físicos regularmente.",
        "Mantenha uma boa qualidade de sono.",
    ],
}


def _tier(dim: _Dimension, score: int) -> Tier:
    if score >= dim.alert_at:
        return "alerta"
    if score >= dim.moderate_at:
        return "moderado"
    return "manutencao"


def _path(dim: _Dimension, tier: Tier) -> str:
    if tier == "alerta":
        return dim.alert_path
    if tier == "moderado":
        return dim.moderate_path
    return MAINTENANCE_PATH


def _justify(dim: _Dimension, score: int, tier: Tier, path: str) -> str:
    if tier == "alerta":
        return f"{dim.name} (score {score}) indica nível crítico - {path} com encaminhamento psicológico urgente."
    if tier == "moderado":
        return f"{dim.name} (score {score}) indica nível moderado - {path}."
    return f"{dim.name} (score {score}) dentro da normalidade - {path}."


def classify_mental_health(depression: int, anxiety: int, stress: int) -> MentalHealthClassificationResult:
    # ordem fixa das frases: depressão, estresse, ansiedade
    evaluated = [
        (DEPRESSION, depression),
        (STRESS, stress),
        (ANXIETY, anxiety),
    ]

    justifications: list[str] = []
    recommendations: list[str] = []
    tiers: list[Tier] = []
    paths: list[str] = []

    for dim, score in evaluated:
        tier = _tier(dim, score)
        path = _path(dim, tier)
        tiers.append(tier)
        paths.append(path)
        justifications.append(_justify(dim, score, tier, path))
        if tier == "alerta":
            recommendations.append(dim.alert_rec)
        elif tier == "moderado":
            recommendations.append(dim.moderate_rec)

    referral = "alerta" in tiers

    critical: CriticalLevel
    if "alerta" in tiers:
        critical = "crítico"
        selected = [p for p, t in zip(paths, tiers) if t == "alerta"]
    elif "moderado" in tiers:
        critical = "moderado"
        selected = [p for p, t in zip(paths, tiers) if t == "moderado"]
    else:
        critical = "baixo"
        selected = [MAINTENANCE_PATH]

    recommendations.extend(GENERAL_RECOMMENDATIONS[critical])

    return MentalHealthClassificationResult(
        recommended_paths=unique(selected),
        psychologist_referral_needed=referral,
        justification=" ".join(justifications),
        critical_level=critical,
        recommendations=unique(recommendations),
    )
