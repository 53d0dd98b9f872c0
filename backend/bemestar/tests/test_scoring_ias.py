# backend/bemestar/tests/test_scoring_ias.py
import pytest

from bemestar.data.ias_questions import ias_allowed_values, ias_max_score, ias_min_score
from bemestar.models.assessment import IasResponse
from bemestar.services.scoring_ias import compute_ias, ias_description, ias_label, ias_percentage


def _total(score: int) -> list[IasResponse]:
    return [IasResponse(question_id=1, value=score)]


@pytest.mark.parametrize(
    "score, expected",
    [(0, "alto_risco"), (30, "alto_risco"), (31, "desbalanceada"), (50, "desbalanceada"),
     (51, "razoavel"), (70, "razoavel"), (71, "saudavel"), (100, "saudavel")],
)
def test_classification_boundaries(score, expected):
    assert compute_ias(_total(score)).classification == expected


def test_all_best_answers_is_healthy(ias_best):
    result = compute_ias(ias_best)
    assert result.total_score == 100
    assert result.classification == "saudavel"


def test_all_worst_answers_is_high_risk(ias_worst):
    result = compute_ias(ias_worst)
    assert result.total_score == 0
    assert result.classification == "alto_risco"


def test_bank_spans_zero_to_hundred():
    assert ias_min_score() == 0
    assert ias_max_score() == 100


def test_inverted_questions_reward_rare_consumption():
    # pergunta 6: "Raramente ou nunca" é a última opção e vale 10
    assert ias_allowed_values(6) == frozenset({0, 2, 5, 8, 10})
    assert ias_allowed_values(8) == frozenset({0, 3, 6, 10})
    assert ias_allowed_values(11) == frozenset()


@pytest.mark.parametrize("score", [10, 40, 60, 90])
def test_recommendations_end_with_universal_block(score):
    recs = compute_ias(_total(score)).recommendations
    assert len(recs) == 8
    assert recs[-3].startswith("Pratique atividade física")
    assert recs[-2].startswith("Durma pelo menos")
    assert recs[-1].startswith("Gerencie o estresse")


def test_high_risk_recommendations_start_with_urgency():
    recs = compute_ias(_total(12)).recommendations
    assert recs[0].startswith("⚠️ URGENTE")


def test_percentage_helper():
    assert ias_percentage(0) == 0
    assert ias_percentage(55) == 55
    assert ias_percentage(100) == 100


def test_labels_and_descriptions():
    assert ias_label("razoavel") == "Razoável"
    assert ias_label("desconhecido") == "desconhecido"
    assert ias_description("saudavel").startswith("Parabéns!")
    assert ias_description("desconhecido") == ""
