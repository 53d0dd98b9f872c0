"""
Utilidades de JWT.
- A emissão fica com o serviço de identidade; aqui só decodificamos.
- create_jwt existe para scripts e testes.
"""
from datetime import datetime, timedelta, timezone
from typing import Any
from jose import jwt
from ..core.config import settings

ALGO = "HS256"

def create_jwt(subject: dict[str, Any], expires_minutes: int | None = None) -> str:
    exp_min = expires_minutes if expires_minutes is not None else settings.JWT_EXPIRES_MIN
    to_encode = {
        "sub": subject.get("sub"),
        "role": subject.get("role"),
        "company_id": subject.get("company_id"),
        "exp": datetime.now(tz=timezone.utc) + timedelta(minutes=exp_min),
        "iat": datetime.now(tz=timezone.utc),
    }
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=ALGO)

def decode_jwt(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGO])
