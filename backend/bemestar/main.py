# backend/bemestar/main.py
"""
API de checkups de bem-estar corporativo.
Questionários DASS-21 e IAS, avaliações combinadas e periodicidade por empresa.
Respostas inválidas viram 422 com o question_id ofensor.
"""
import logging, time

# carrega backend/.env antes de importar a configuração
from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv(), override=True)

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db.mongo import connect_to_mongo, disconnect_from_mongo
from .core.config import settings
from .routes import assessments, companies, questionnaires
from .services.validation import InvalidResponseError
from .telemetry.logging import setup_logging

setup_logging()
http_logger = logging.getLogger("bemestar.http")

@asynccontextmanager
async def lifespan(app: FastAPI):
    connect_to_mongo()
    yield
    disconnect_from_mongo()

app = FastAPI(title="Bem-Estar Corporativo API", version="0.1.0", lifespan=lifespan)

# ---------------- CORS ----------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- Log de requisições ----------------
QUIET_PATHS = {"/health"}

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        http_logger.exception("%s %s falhou após %.4fs", request.method, request.url.path, time.perf_counter() - start)
        raise
    if request.url.path not in QUIET_PATHS:
        http_logger.info("%s %s -> %s em %.4fs", request.method, request.url.path,
                         response.status_code, time.perf_counter() - start)
    return response

# ---------------- Erros ----------------
@app.exception_handler(InvalidResponseError)
async def invalid_response_handler(request: Request, exc: InvalidResponseError):
    http_logger.warning("%s %s resposta inválida (question_id=%s): %s",
                        request.method, request.url.path, exc.question_id, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "question_id": exc.question_id},
    )

# ---------------- Healthcheck ----------------
@app.get("/health", tags=["misc"])
async def health():
    return {"ok": True}

# ---------------- Routers ----------------
app.include_router(questionnaires.router, prefix="/questionnaires", tags=["questionnaires"])
app.include_router(assessments.router,    prefix="/assessments",    tags=["assessments"])
app.include_router(companies.router,      prefix="/companies",      tags=["companies"])
