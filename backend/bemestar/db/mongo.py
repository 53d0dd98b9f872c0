# bemestar/db/mongo.py
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient

from ..core.config import settings

logger = logging.getLogger(__name__)

_client = None
_db = None

def connect_to_mongo():
    """
    Conecta ao Mongo e cria índices. Lê MONGO_URI e MONGO_DB do Settings.
    Chamado no startup (lifespan) e é SÍNCRONO.
    """
    global _client, _db
    if _client:
        return _db

    _client = MongoClient(settings.MONGO_URI, uuidRepresentation="standard", tz_aware=True)
    _db = _client[settings.MONGO_DB]

    # ---- ÍNDICES ----

    # checkups: histórico por colaborador, mais recente primeiro
    _db.checkups.create_index([("user_id", ASCENDING), ("date", DESCENDING)])
    # relatórios por empresa
    _db.checkups.create_index([("company_id", ASCENDING), ("date", DESCENDING)])
    # uma configuração de periodicidade por empresa
    _db.checkup_settings.create_index("company_id", unique=True)

    logger.info("MongoDB conectado (db=%s)", settings.MONGO_DB)
    return _db


def disconnect_from_mongo():
    """
    Fecha a conexão. Se o banco se chama bem_estar_test_*, apaga-o.
    """
    global _client, _db
    if _client:
        if settings.MONGO_DB.startswith("bem_estar_test_"):
            _client.drop_database(settings.MONGO_DB)
        _client.close()
    _client = None
    _db = None


def get_db():
    if _db is None:
        raise RuntimeError("MongoDB não inicializado. Chame connect_to_mongo() no startup.")
    return _db
