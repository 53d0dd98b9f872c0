# backend/bemestar/tests/test_scheduler.py
from datetime import datetime, timedelta, timezone

import pytest

from bemestar.models.assessment import CheckupSettings
from bemestar.services.scheduler import checkup_frequency_message, next_checkup_date

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)
SETTINGS = CheckupSettings(normal_interval_days=90, severe_interval_days=30)


@pytest.mark.parametrize("severity", ["severo", "extremamente_severo"])
def test_severe_bands_use_short_interval(severity):
    assert next_checkup_date(severity, SETTINGS, now=NOW) == datetime(2026, 2, 9, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("severity", ["normal", "leve", "moderado"])
def test_other_bands_use_normal_interval(severity):
    assert next_checkup_date(severity, SETTINGS, now=NOW) == datetime(2026, 4, 10, 12, 0, tzinfo=timezone.utc)


def test_default_clock_is_now():
    before = datetime.now(timezone.utc)
    due = next_checkup_date("normal", CheckupSettings(normal_interval_days=7, severe_interval_days=3))
    assert before + timedelta(days=7) <= due <= datetime.now(timezone.utc) + timedelta(days=7)


def test_frequency_messages():
    severe = checkup_frequency_message("severo", NOW + timedelta(days=30), now=NOW)
    assert severe == (
        "Próximo checkup recomendado em 30 dias "
        "(acompanhamento intensivo devido à gravidade detectada)"
    )
    regular = checkup_frequency_message("leve", NOW + timedelta(days=89, hours=1), now=NOW)
    assert regular == "Próximo checkup recomendado em 90 dias (acompanhamento regular)"
