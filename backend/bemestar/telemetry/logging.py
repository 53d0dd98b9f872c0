"""
Logging do serviço de checkups.
LOG_LEVEL controla o nível (INFO por padrão); os loggers do Uvicorn
seguem o mesmo formato. Pontuações de DASS-21 e IAS só aparecem em DEBUG.
"""
import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for uv_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(uv_logger).setLevel(level)
