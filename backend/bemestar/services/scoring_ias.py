"""
Cálculo do IAS (Índice de Alimentação Saudável), escala 0..100.
Os pesos vêm do banco de perguntas; aqui só se soma e classifica.
"""
import math
from typing import Iterable

from .typing import IasClassification
from ..models.assessment import IasResponse, IasResult

IAS_MAX_SCORE = 100

# limites superiores inclusivos
_CUTS: tuple[tuple[int, IasClassification], ...] = (
    (30, "alto_risco"),
    (50, "desbalanceada"),
    (70, "razoavel"),
)

IAS_LABELS = {
    "alto_risco": "Alto Risco",
    "desbalanceada": "Desbalanceada",
    "razoavel": "Razoável",
    "saudavel": "Saudável",
}

IAS_DESCRIPTIONS = {
    "alto_risco": "Sua alimentação apresenta alto risco para a saúde e requer mudanças urgentes.",
    "desbalanceada": "Sua alimentação está desbalanceada e precisa de ajustes importantes.",
    "razoavel": "Sua alimentação está razoável, mas ainda há espaço para melhorias.",
    "saudavel": "Parabéns! Você mantém uma alimentação saudável e equilibrada.",
}

_RECOMMENDATIONS: dict[IasClassification, list[str]] = {
    "alto_risco": [
        "⚠️ URGENTE: Sua alimentação apresenta alto risco para a saúde. Procure um nutricionista imediatamente.",
        "Elimine completamente alimentos processados e bebidas açucaradas.",
        "Faça pelo menos 3 refeições balanceadas por dia.",
        "Aumente drasticamente o consumo de frutas e vegetais.",
        "Beba pelo menos 2 litros de água por dia.",
    ],
    "desbalanceada": [
        "Sua alimentação está desbalanceada e precisa de ajustes importantes.",
        "Considere consultar um nutricionista para orientação personalizada.",
        "Reduza significativamente o consumo de alimentos processados.",
        "Inclua mais frutas e vegetais nas suas refeições diárias.",
        "Estabeleça horários regulares para as refeições.",
    ],
    "razoavel": [
        "Sua alimentação está razoável, mas ainda há espaço para melhorias.",
        "Continue reduzindo alimentos processados e bebidas açucaradas.",
        "Tente incluir mais cereais integrais na sua dieta.",
        "Mantenha a regularidade das refeições.",
        "Aumente a variedade de frutas e vegetais consumidos.",
    ],
    "saudavel": [
        "Parabéns! Você mantém uma alimentação saudável.",
        "Continue mantendo os bons hábitos alimentares.",
        "Varie os tipos de frutas e vegetais para obter diferentes nutrientes.",
        "Mantenha a hidratação adequada.",
        "Continue evitando alimentos processados e bebidas açucaradas.",
    ],
}

# sempre ao final, qualquer que seja a classificação
_CLOSING = [
    "Pratique atividade física regularmente para complementar uma alimentação saudável.",
    "Durma pelo menos 7-8 horas por noite para melhor metabolismo.",
    "Gerencie o estresse, pois ele pode afetar seus hábitos alimentares.",
]


def classify_ias(total_score: int) -> IasClassification:
    for limit, label in _CUTS:
        if total_score <= limit:
            return label
    return "saudavel"


def ias_recommendations(classification: IasClassification) -> list[str]:
    return [*_RECOMMENDATIONS[classification], *_CLOSING]


def compute_ias(responses: Iterable[IasResponse]) -> IasResult:
    total = sum(r.value for r in responses)
    classification = classify_ias(total)
    return IasResult(
        total_score=total,
        classification=classification,
        recommendations=ias_recommendations(classification),
    )


def ias_percentage(score: float) -> int:
    # arredondamento "half-up", como na interface
    return math.floor(score / IAS_MAX_SCORE * 100 + 0.5)


def ias_label(classification: str) -> str:
    return IAS_LABELS.get(classification, classification)


def ias_description(classification: str) -> str:
    return IAS_DESCRIPTIONS.get(classification, "")
