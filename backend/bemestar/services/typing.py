"""
Tipos fechados compartilhados pelo motor de avaliação.
As tuplas *_ORDER definem a ordem de gravidade (da menor para a maior).
"""
from typing import Iterable, Literal

Severity = Literal["normal", "leve", "moderado", "severo", "extremamente_severo"]
CriticalLevel = Literal["baixo", "moderado", "alto", "crítico"]
IasClassification = Literal["alto_risco", "desbalanceada", "razoavel", "saudavel"]
Category = Literal["stress", "anxiety", "depression"]

SEVERITY_ORDER: tuple[Severity, ...] = ("normal", "leve", "moderado", "severo", "extremamente_severo")
CRITICAL_ORDER: tuple[CriticalLevel, ...] = ("baixo", "moderado", "alto", "crítico")

SEVERE_BANDS: frozenset[Severity] = frozenset({"severo", "extremamente_severo"})


def worst_critical(*levels: CriticalLevel) -> CriticalLevel:
    return max(levels, key=CRITICAL_ORDER.index)


def unique(items: Iterable[str]) -> list[str]:
    """Remove duplicatas mantendo a ordem de inserção."""
    return list(dict.fromkeys(items))
