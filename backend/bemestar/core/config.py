"""
Configuração central da app (fonte única de verdade).
Lê variáveis de ambiente e expõe um objeto Settings tipado.
"""
import os
from pydantic import BaseModel, Field

from ..models.assessment import CheckupSettings


def _origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    MONGO_URI: str = Field(default_factory=lambda: os.getenv("MONGO_URI", "mongodb://localhost:27017"))
    MONGO_DB: str  = Field(default_factory=lambda: os.getenv("MONGO_DB", "bem_estar"))
    JWT_SECRET: str = Field(default_factory=lambda: os.getenv("JWT_SECRET", "changeme"))
    JWT_EXPIRES_MIN: int = Field(default_factory=lambda: int(os.getenv("JWT_EXPIRES_MIN", "60")))
    CORS_ORIGINS: list[str] = Field(default_factory=_origins)
    # periodicidade padrão quando a empresa não configurou a sua
    DEFAULT_NORMAL_INTERVAL_DAYS: int = Field(default_factory=lambda: int(os.getenv("DEFAULT_NORMAL_INTERVAL_DAYS", "90")))
    DEFAULT_SEVERE_INTERVAL_DAYS: int = Field(default_factory=lambda: int(os.getenv("DEFAULT_SEVERE_INTERVAL_DAYS", "30")))
    HISTORY_MAX_LIMIT: int = Field(default_factory=lambda: int(os.getenv("HISTORY_MAX_LIMIT", "50")))

    def default_checkup_settings(self) -> CheckupSettings:
        return CheckupSettings(
            normal_interval_days=self.DEFAULT_NORMAL_INTERVAL_DAYS,
            severe_interval_days=self.DEFAULT_SEVERE_INTERVAL_DAYS,
        )

settings = Settings()
