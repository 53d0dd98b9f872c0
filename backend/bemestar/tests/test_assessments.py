# backend/bemestar/tests/test_assessments.py
import pytest

from bemestar.models.assessment import CheckupSettings

pytestmark = pytest.mark.asyncio


def _dass21_payload(make_dass21, **raw):
    return [r.model_dump() for r in make_dass21(**raw)]


async def test_health(async_client):
    r = await async_client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


async def test_questionnaires(async_client):
    r = await async_client.get("/questionnaires/dass21")
    assert r.status_code == 200
    assert len(r.json()["questions"]) == 21
    assert [o["value"] for o in r.json()["options"]] == [0, 1, 2, 3]

    r2 = await async_client.get("/questionnaires/ias")
    assert r2.status_code == 200
    assert len(r2.json()["questions"]) == 10
    assert r2.json()["max_score"] == 100


async def test_dass21_flow(user_auth, async_client, make_dass21, checkups):
    payload = {"responses": _dass21_payload(make_dass21, stress=10, anxiety=3, depression=2)}
    r = await async_client.post("/assessments/dass21", headers=user_auth, json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert "assessment_id" in data
    assert data["checkup"]["scores"] == {"stress": 20, "anxiety": 6, "depression": 4}
    assert data["checkup"]["severity_level"] == "moderado"
    assert data["severity_label"] == "Moderado"
    assert data["urgency"] == "medium"
    assert data["mental_health"]["recommended_paths"] == ["Trilha Estresse Moderado"]
    assert data["next_checkup_message"] == "Próximo checkup recomendado em 90 dias (acompanhamento regular)"
    assert len(checkups.docs) == 1
    assert checkups.docs[0]["company_id"] == "acme"

    # Histórico
    r2 = await async_client.get("/assessments/history?limit=3", headers=user_auth)
    assert r2.status_code == 200
    assert [d["_id"] for d in r2.json()] == [data["assessment_id"]]


async def test_company_interval_is_used(user_auth, async_client, make_dass21, checkup_settings):
    checkup_settings.by_company["acme"] = CheckupSettings(normal_interval_days=60, severe_interval_days=15)
    payload = {"responses": _dass21_payload(make_dass21, depression=15)}
    r = await async_client.post("/assessments/dass21", headers=user_auth, json=payload)
    assert r.status_code == 200
    assert r.json()["checkup"]["severity_level"] == "extremamente_severo"
    assert "em 15 dias" in r.json()["next_checkup_message"]


async def test_incomplete_dass21_is_rejected(user_auth, async_client, make_dass21, checkups):
    payload = {"responses": _dass21_payload(make_dass21)[:20]}
    r = await async_client.post("/assessments/dass21", headers=user_auth, json=payload)
    assert r.status_code == 422
    assert r.json()["question_id"] == 21
    assert checkups.docs == []


async def test_requires_token(async_client, make_dass21):
    r = await async_client.post("/assessments/dass21", json={"responses": _dass21_payload(make_dass21)})
    assert r.status_code == 401

    r2 = await async_client.get("/assessments/history", headers={"Authorization": "Bearer nope"})
    assert r2.status_code == 401


async def test_ias_scoring(user_auth, async_client, ias_best):
    payload = {"responses": [r.model_dump() for r in ias_best]}
    r = await async_client.post("/assessments/ias", headers=user_auth, json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["total_score"] == 100
    assert data["classification"] == "saudavel"
    assert data["percentage"] == 100
    assert data["label"] == "Saudável"


async def test_ias_invalid_weight(user_auth, async_client, ias_best):
    responses = [r.model_dump() for r in ias_best]
    responses[7]["value"] = 5  # pergunta 8 só aceita 0, 3, 6, 10
    r = await async_client.post("/assessments/ias", headers=user_auth, json={"responses": responses})
    assert r.status_code == 422
    assert r.json()["question_id"] == 8


async def test_combined_flow(user_auth, async_client, make_dass21, ias_worst, checkups):
    payload = {
        "dass21": _dass21_payload(make_dass21, depression=12, stress=14),
        "ias": [r.model_dump() for r in ias_worst],
    }
    r = await async_client.post("/assessments/combined", headers=user_auth, json=payload)
    assert r.status_code == 200, r.text
    checkup = r.json()["checkup"]
    assert checkup["ias_classification"] == "alto_risco"
    assert checkup["combined_critical_level"] == "crítico"
    assert checkup["combined_psychologist_referral_needed"] is True
    assert checkup["combined_recommended_paths"] == [
        "Trilha Depressão Alerta",
        "Trilha Estresse Alerta",
        "Trilha Alimentação Crítica",
        "Trilha Bem-estar Integrado",
    ]
    assert checkup["combined_recommendations"][0] == "=== SAÚDE MENTAL ==="
    assert len(checkups.docs) == 1


async def test_history_is_per_user(make_auth, async_client, make_dass21):
    alice, bob = make_auth(), make_auth()
    payload = {"responses": _dass21_payload(make_dass21)}
    for _ in range(2):
        await async_client.post("/assessments/dass21", headers=alice, json=payload)
    await async_client.post("/assessments/dass21", headers=bob, json=payload)

    r = await async_client.get("/assessments/history", headers=alice)
    assert len(r.json()) == 2
    r2 = await async_client.get("/assessments/history?limit=1", headers=alice)
    assert len(r2.json()) == 1
