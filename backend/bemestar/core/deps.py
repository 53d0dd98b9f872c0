"""
Dependências comuns para FastAPI:
- current_db
- current_user (via Authorization: Bearer <token>)
- repositórios de checkup e de periodicidade
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from ..db.mongo import get_db
from ..core.config import settings
from ..core.security import decode_jwt
from ..models.checkup import CheckupRepo, CheckupSettingsRepo

# tokens são emitidos pelo serviço de identidade da plataforma
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def current_db():
    return get_db()

async def current_user(token: str = Depends(oauth2_scheme)) -> dict:
    try:
        payload = decode_jwt(token)
        return {
            "sub": payload["sub"],
            "role": payload.get("role", "colaborador"),
            "company_id": payload.get("company_id"),
        }
    except (JWTError, KeyError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")

def checkup_repo(db=Depends(current_db)) -> CheckupRepo:
    return CheckupRepo(db)

def checkup_settings_repo(db=Depends(current_db)) -> CheckupSettingsRepo:
    return CheckupSettingsRepo(db, default=settings.default_checkup_settings())
