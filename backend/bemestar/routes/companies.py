from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import checkup_settings_repo, current_user
from ..models.assessment import CheckupSettings
from ..models.checkup import CheckupSettingsRepo

router = APIRouter()


def _check_company(user: dict, company_id: str) -> None:
    """super_admin vê todas; os demais só a própria empresa."""
    if user["role"] != "super_admin" and user["company_id"] != company_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Empresa fora do seu escopo")


@router.get("/{company_id}/checkup-settings", response_model=CheckupSettings, summary="Periodicidade de checkups")
async def get_checkup_settings(
    company_id: str,
    user=Depends(current_user),
    repo: CheckupSettingsRepo = Depends(checkup_settings_repo),
):
    _check_company(user, company_id)
    return await repo.get(company_id)


@router.put("/{company_id}/checkup-settings", response_model=CheckupSettings, summary="Alterar periodicidade")
async def put_checkup_settings(
    company_id: str,
    payload: CheckupSettings,
    user=Depends(current_user),
    repo: CheckupSettingsRepo = Depends(checkup_settings_repo),
):
    _check_company(user, company_id)
    if user["role"] not in ("gerente", "super_admin"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Apenas gestores alteram a periodicidade")
    return await repo.upsert(company_id, payload)
