# backend/bemestar/tests/conftest.py
"""
Fixtures e helpers para os testes.
- Testes do motor: funções puras, sem I/O.
- Testes da API: FastAPI via httpx.ASGITransport (sem lifespan, sem Mongo);
  os repositórios são trocados por fakes em memória via dependency_overrides.
"""
import os
import sys
import uuid
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# ---- env de teste (antes de importar bemestar.main) ----
os.environ.setdefault("MONGO_DB", f"bem_estar_test_{uuid.uuid4().hex[:8]}")
os.environ.setdefault("JWT_SECRET", "test-secret")

# ---- garantir imports absolutos 'bemestar.*' ----
ROOT_DIR = Path(__file__).resolve().parents[1]   # .../backend/bemestar
sys.path.insert(0, str(ROOT_DIR.parent))         # .../backend

from bemestar.main import app  # noqa: E402
from bemestar.core.deps import checkup_repo, checkup_settings_repo  # noqa: E402
from bemestar.core.security import create_jwt  # noqa: E402
from bemestar.models.assessment import CheckupSettings, Dass21Response, IasResponse  # noqa: E402
from bemestar.data.ias_questions import IAS_QUESTIONS  # noqa: E402


# -------- Fakes de persistência --------
class FakeCheckupRepo:
    def __init__(self):
        self.docs: list[dict] = []

    async def save(self, user_id, company_id, record):
        _id = uuid.uuid4().hex
        self.docs.append({"_id": _id, "user_id": user_id, "company_id": company_id, **record.model_dump(mode="json")})
        return _id

    async def history(self, user_id, limit=6):
        mine = [d for d in self.docs if d["user_id"] == user_id]
        return sorted(mine, key=lambda d: d["date"], reverse=True)[:limit]


class FakeSettingsRepo:
    def __init__(self, default: CheckupSettings):
        self.default = default
        self.by_company: dict[str, CheckupSettings] = {}

    async def get(self, company_id):
        return self.by_company.get(company_id, self.default)

    async def upsert(self, company_id, settings):
        self.by_company[company_id] = settings
        return settings


# -------- Fixtures --------
@pytest.fixture
def checkups():
    return FakeCheckupRepo()

@pytest.fixture
def checkup_settings():
    return FakeSettingsRepo(CheckupSettings(normal_interval_days=90, severe_interval_days=30))

@pytest_asyncio.fixture
async def async_client(checkups, checkup_settings):
    app.dependency_overrides[checkup_repo] = lambda: checkups
    app.dependency_overrides[checkup_settings_repo] = lambda: checkup_settings
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()

def auth_headers(role: str = "colaborador", company_id: str | None = "acme") -> dict:
    email = f"test_{uuid.uuid4().hex[:8]}@example.com"
    token = create_jwt({"sub": email, "role": role, "company_id": company_id})
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture
def user_auth():
    return auth_headers("colaborador")

@pytest.fixture
def manager_auth():
    return auth_headers("gerente")


# -------- Construtores de respostas --------
def _spread(raw: int) -> list[int]:
    """Distribui uma soma bruta (0..21) pelos 7 itens da subescala."""
    out = []
    for _ in range(7):
        v = min(3, raw)
        out.append(v)
        raw -= v
    return out

def dass21_responses(stress: int = 0, anxiety: int = 0, depression: int = 0) -> list[Dass21Response]:
    """Somas BRUTAS por subescala (antes do x2)."""
    values = _spread(stress) + _spread(anxiety) + _spread(depression)
    return [Dass21Response(question_id=i, value=v) for i, v in enumerate(values, start=1)]

def ias_best_responses() -> list[IasResponse]:
    return [IasResponse(question_id=q["id"], value=max(o["value"] for o in q["options"])) for q in IAS_QUESTIONS]

def ias_worst_responses() -> list[IasResponse]:
    return [IasResponse(question_id=q["id"], value=min(o["value"] for o in q["options"])) for q in IAS_QUESTIONS]

@pytest.fixture
def make_dass21():
    return dass21_responses

@pytest.fixture
def ias_best():
    return ias_best_responses()

@pytest.fixture
def ias_worst():
    return ias_worst_responses()

@pytest.fixture
def make_auth():
    return auth_headers
