"""
Avaliação combinada DASS-21 + IAS.
- Nível crítico final = o pior entre saúde mental e alimentação.
- Trilhas: as de saúde mental + uma de alimentação (+ integrada se ambos ruins).
- Encaminhamento psicológico também quando o IAS é de alto risco.
"""
from .typing import CriticalLevel, IasClassification, unique, worst_critical
from .mental_health_paths import classify_mental_health
from .scoring_dass21 import highest_severity, overall_score
from .scoring_ias import ias_label
from ..models.assessment import (
    CombinedAssessmentResult,
    Dass21Classification,
    Dass21Scores,
    Dass21Snapshot,
    IasResult,
    MentalHealthClassificationResult,
)

IAS_CRITICALITY: dict[IasClassification, CriticalLevel] = {
    "alto_risco": "crítico",
    "desbalanceada": "alto",
    "razoavel": "moderado",
    "saudavel": "baixo",
}

IAS_PATHS: dict[IasClassification, str] = {
    "alto_risco": "Trilha Alimentação Crítica",
    "desbalanceada": "Trilha Alimentação Moderada",
    "razoavel": "Trilha Alimentação Preventiva",
    "saudavel": "Trilha Manutenção Alimentar",
}

INTEGRATED_PATH = "Trilha Bem-estar Integrado"

# IAS que, junto de saúde mental alterada, pedem abordagem integrada
_POOR_DIET = frozenset({"alto_risco", "desbalanceada"})

SECTION_MENTAL = "=== SAÚDE MENTAL ==="
SECTION_DIET = "=== ALIMENTAÇÃO SAUDÁVEL ==="
SECTION_INTEGRATED = "=== RECOMENDAÇÕES INTEGRADAS ==="
SECTION_UNIVERSAL = "=== PRÁTICAS UNIVERSAIS ==="

INTEGRATED_RECOMMENDATIONS: dict[CriticalLevel, list[str]] = {
    "crítico": [
        "🚨 URGENTE: Busque apoio profissional imediato (psicólogo + nutricionista).",
        "Considere um programa de bem-estar integrado que aborde tanto aspectos mentais quanto nutricionais.",
        "Evite tomar decisões importantes sozinho e mantenha apoio de familiares/amigos.",
    ],
    "alto": [
        "⚠️ IMPORTANTE: Recomenda-se apoio profissional especializado.",
        "Implemente mudanças graduais tanto nos hábitos alimentares quanto no manejo do estresse.",
        "Considere terapia comportamental para modificação de hábitos.",
    ],
    "moderado": [
        "Adote uma abordagem preventiva focada em bem-estar integral.",
        "Estabeleça rotinas saudáveis que incluam tanto cuidados mentais quanto alimentares.",
        "Monitore seus indicadores e busque apoio se houver piora.",
    ],
    "baixo": [
        "Continue mantendo seus bons hábitos de vida.",
        "Use este momento de estabilidade para fortalecer suas práticas de autocuidado.",
        "Compartilhe suas estratégias de bem-estar com outras pessoas.",
    ],
}

UNIVERSAL_PRACTICES = [
    "🏃‍♂️ Pratique atividade física regular (pelo menos 30 min, 3x por semana).",
    "😴 Mantenha uma rotina de sono adequada (7-8 horas por noite).",
    "🤝 Cultive relacionamentos sociais saudáveis e redes de apoio.",
    "🧘‍♀️ Dedique tempo para atividades de relaxamento e lazer.",
    "📱 Limite o uso de dispositivos eletrônicos, especialmente antes de dormir.",
]

CORRELATION_NOTE = (
    "CORRELAÇÃO: Identificada relação entre estado mental e hábitos alimentares "
    "inadequados, sugerindo abordagem integrada."
)


def _combined_paths(mental_paths: list[str], ias: IasClassification) -> list[str]:
    paths = [*mental_paths, IAS_PATHS[ias]]
    if any("Alerta" in p for p in mental_paths) and ias in _POOR_DIET:
        paths.append(INTEGRATED_PATH)
    return unique(paths)


def _justification(mental: MentalHealthClassificationResult, ias: IasResult) -> str:
    parts = [
        f"SAÚDE MENTAL: {mental.justification}",
        f"ALIMENTAÇÃO: Score IAS {ias.total_score}/100 indica alimentação {ias_label(ias.classification).lower()}.",
    ]
    if mental.critical_level != "baixo" and ias.classification in _POOR_DIET:
        parts.append(CORRELATION_NOTE)
    return " ".join(parts)


def _recommendations(mental: list[str], diet: list[str], level: CriticalLevel) -> list[str]:
    # cabeçalhos e ordem das seções são fixos; o conteúdo de cada seção vem do seu motor
    return [
        SECTION_MENTAL,
        *mental,
        SECTION_DIET,
        *diet,
        SECTION_INTEGRATED,
        *INTEGRATED_RECOMMENDATIONS[level],
        SECTION_UNIVERSAL,
        *UNIVERSAL_PRACTICES,
    ]


def compose_assessment(
    scores: Dass21Scores,
    classification: Dass21Classification,
    ias: IasResult,
) -> CombinedAssessmentResult:
    mental = classify_mental_health(scores.depression, scores.anxiety, scores.stress)
    level = worst_critical(mental.critical_level, IAS_CRITICALITY[ias.classification])

    return CombinedAssessmentResult(
        dass21=Dass21Snapshot(
            scores=scores,
            classifications=classification,
            overall_score=overall_score(scores),
            severity_level=highest_severity(classification),
        ),
        ias=ias,
        recommended_paths=_combined_paths(mental.recommended_paths, ias.classification),
        psychologist_referral_needed=mental.psychologist_referral_needed or ias.classification == "alto_risco",
        justification=_justification(mental, ias),
        critical_level=level,
        recommendations=_recommendations(mental.recommendations, ias.recommendations, level),
    )
