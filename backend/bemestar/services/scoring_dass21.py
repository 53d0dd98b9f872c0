"""
Cálculo de pontuações DASS-21.
Soma por subescala, multiplicada por 2 (forma reduzida de 21 itens),
e classificação em 5 faixas com cortes próprios de cada subescala.
"""
from typing import Iterable

from .typing import SEVERITY_ORDER, Severity
from ..data.dass21_questions import question_ids
from ..models.assessment import Dass21Classification, Dass21Response, Dass21Scores

STR_IDS = question_ids("stress")      # 1..7
ANX_IDS = question_ids("anxiety")     # 8..14
DEP_IDS = question_ids("depression")  # 15..21

# limites superiores inclusivos: normal, leve, moderado, severo
DEP_CUTS = (9, 13, 20, 27)
ANX_CUTS = (7, 9, 14, 19)
STR_CUTS = (14, 18, 25, 33)


def compute_scores(responses: Iterable[Dass21Response]) -> Dass21Scores:
    """
    Respostas ausentes contam 0; ids repetidos somam todas as ocorrências.
    Não valida nada: quem chama garante o conjunto completo.
    """
    responses = list(responses)
    S = sum(r.value for r in responses if r.question_id in STR_IDS) * 2
    A = sum(r.value for r in responses if r.question_id in ANX_IDS) * 2
    D = sum(r.value for r in responses if r.question_id in DEP_IDS) * 2
    return Dass21Scores(stress=S, anxiety=A, depression=D)


def _band(score: int, cuts: tuple[int, int, int, int]) -> Severity:
    for limit, label in zip(cuts, SEVERITY_ORDER):
        if score <= limit:
            return label
    return "extremamente_severo"


def classify_scores(scores: Dass21Scores) -> Dass21Classification:
    return Dass21Classification(
        stress=_band(scores.stress, STR_CUTS),
        anxiety=_band(scores.anxiety, ANX_CUTS),
        depression=_band(scores.depression, DEP_CUTS),
    )


def highest_severity(classification: Dass21Classification) -> Severity:
    values = (classification.stress, classification.anxiety, classification.depression)
    return max(values, key=SEVERITY_ORDER.index)


def overall_score(scores: Dass21Scores) -> int:
    # média simples das três subescalas; a soma é par, então nunca cai em .5
    return round((scores.depression + scores.anxiety + scores.stress) / 3)
