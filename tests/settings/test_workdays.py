import pytest

from src.earnings_ticker.earnings_ticker.core.exceptions import ValidationError
from src.earnings_ticker.earnings_ticker.settings.workdays import WorkdaySettings


def test_defaults():
    settings = WorkdaySettings()
    assert settings.annual_workdays == 261
    assert settings.days_off == 26
    assert settings.days_actively_working == 235


def test_update_notifies_listeners():
    settings = WorkdaySettings()
    seen = []
    settings.subscribe(lambda s: seen.append(s.days_actively_working))

    assert settings.update(days_off=11) is True
    assert seen == [250]


def test_update_without_change_is_silent():
    settings = WorkdaySettings()
    seen = []
    settings.subscribe(lambda s: seen.append(s))

    assert settings.update(annual_workdays=261) is False
    assert seen == []


def test_unsubscribe():
    settings = WorkdaySettings()
    seen = []
    unsubscribe = settings.subscribe(lambda s: seen.append(s))
    unsubscribe()

    settings.update(days_off=0)
    assert seen == []


@pytest.mark.parametrize("annual, days_off", [(0, 0), (100, 100), (100, 150), (261, -1)])
def test_rejects_non_positive_working_days(annual, days_off):
    settings = WorkdaySettings()
    with pytest.raises(ValidationError):
        settings.update(annual_workdays=annual, days_off=days_off)
    assert settings.days_actively_working == 235
