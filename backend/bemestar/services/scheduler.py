# bemestar/services/scheduler.py
"""
Agenda do próximo checkup.
O intervalo vem da configuração da empresa; faixas severas usam o intervalo curto.
"""
import math
from datetime import datetime, timedelta, timezone
from typing import Optional

from .typing import SEVERE_BANDS, Severity
from ..models.assessment import CheckupSettings


def _now(now: Optional[datetime]) -> datetime:
    """Relógio injetável; sem valor, usa o horário atual em UTC."""
    if now is None:
        return datetime.now(timezone.utc)
    return now


def next_checkup_date(
    severity: Severity,
    settings: CheckupSettings,
    now: Optional[datetime] = None,
) -> datetime:
    days = settings.severe_interval_days if severity in SEVERE_BANDS else settings.normal_interval_days
    return _now(now) + timedelta(days=days)


def checkup_frequency_message(
    severity: Severity,
    next_date: datetime,
    now: Optional[datetime] = None,
) -> str:
    days = math.ceil((next_date - _now(now)).total_seconds() / 86400)
    if severity in SEVERE_BANDS:
        return (
            f"Próximo checkup recomendado em {days} dias "
            "(acompanhamento intensivo devido à gravidade detectada)"
        )
    return f"Próximo checkup recomendado em {days} dias (acompanhamento regular)"
