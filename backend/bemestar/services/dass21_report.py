"""
Textos de apresentação do DASS-21: rótulos, urgência e recomendações
por subescala exibidas ao colaborador após o checkup.
"""
from typing import Literal

from .typing import SEVERE_BANDS
from ..models.assessment import Dass21Classification

Urgency = Literal["low", "medium", "high", "critical"]

SEVERITY_LABELS = {
    "normal": "Normal",
    "leve": "Leve",
    "moderado": "Moderado",
    "severo": "Severo",
    "extremamente_severo": "Extremamente Severo",
}

_URGENCY: dict[str, Urgency] = {
    "normal": "low",
    "leve": "low",
    "moderado": "medium",
    "severo": "high",
    "extremamente_severo": "critical",
}

# (leve, moderado, severo ou pior)
_CATEGORY_TEXT = {
    "stress": (
        "Pequenos sinais de estresse detectados. Cuide da sua rotina e adote hábitos saudáveis.",
        "Sinais evidentes de estresse. Busque relaxamento e avalie se precisa de ajuda profissional.",
        "Níveis elevados de estresse detectados. É recomendável procurar apoio especializado.",
    ),
    "anxiety": (
        "Pequenos sinais de ansiedade detectados. Pratique técnicas de respiração e relaxamento.",
        "Sinais evidentes de ansiedade. Considere buscar apoio profissional.",
        "Níveis elevados de ansiedade detectados. É importante procurar ajuda especializada.",
    ),
    "depression": (
        "Pequenos sinais de depressão detectados. Mantenha atividades prazerosas e contato social.",
        "Sinais evidentes de depressão. É recomendável buscar apoio profissional.",
        "Níveis elevados de depressão detectados. Procure um profissional de saúde mental urgentemente.",
    ),
}

_GENERAL = [
    "Pratique atividades físicas regularmente para liberar endorfinas e melhorar o bem-estar.",
    "Adote técnicas de relaxamento, como meditação ou respiração profunda.",
    "Melhore sua rotina de sono, garantindo um descanso adequado.",
    "Converse com amigos ou familiares sobre o que está sentindo.",
]


def severity_label(severity: str) -> str:
    return SEVERITY_LABELS.get(severity, severity)


def severity_urgency(severity: str) -> Urgency:
    return _URGENCY.get(severity, "low")


def dass21_recommendations(classification: Dass21Classification) -> list[str]:
    """
    Sem nenhuma subescala elevada devolve só a mensagem de parabéns.
    Caso contrário: uma frase por subescala alterada, quatro gerais e,
    se houver severo ou pior, o aviso de ajuda imediata.
    """
    bands = {
        "stress": classification.stress,
        "anxiety": classification.anxiety,
        "depression": classification.depression,
    }
    if all(b == "normal" for b in bands.values()):
        return [
            "Parabéns! Você não apresenta sintomas significativos de estresse, ansiedade ou depressão.",
            "Continue mantendo seus hábitos saudáveis e práticas de bem-estar.",
        ]

    out: list[str] = []
    for category, band in bands.items():
        if band == "normal":
            continue
        mild, moderate, severe = _CATEGORY_TEXT[category]
        if band == "leve":
            out.append(mild)
        elif band == "moderado":
            out.append(moderate)
        else:
            out.append(severe)

    out.extend(_GENERAL)
    if any(b in SEVERE_BANDS for b in bands.values()):
        out.append("⚠️ IMPORTANTE: Seus resultados indicam a necessidade de buscar ajuda profissional imediatamente.")
    return out
