# tests/test_api.py

from datetime import date

import pytest

import calhijri
from calhijri import CalendarSystem, HijriDate
from calhijri.engines.specs import UAQ, UaqParams
from calhijri.engines.uaq import UmmAlQuraEngine


def test_list_engines():
    assert calhijri.list_engines() == ["fcna", "uaq"]


def test_calendar_coercion():
    assert CalendarSystem.coerce("UAQ") is CalendarSystem.UAQ
    assert CalendarSystem.coerce(CalendarSystem.FCNA) is CalendarSystem.FCNA
    assert str(CalendarSystem.FCNA) == "fcna"
    with pytest.raises(ValueError):
        CalendarSystem.coerce("tabular")
    with pytest.raises(ValueError):
        calhijri.to_gregorian(1444, 1, 1, calendar="civil")


def test_string_and_enum_calendars_agree():
    a = calhijri.to_gregorian(1446, 9, 1, calendar="fcna")
    b = calhijri.to_gregorian(1446, 9, 1, calendar=CalendarSystem.FCNA)
    assert a == b


def test_engine_info():
    info = calhijri.engine_info("uaq")
    assert info["first_year"] == 1318
    assert info["last_year"] == 1500
    assert info["end_day"] == "2077-11-17"
    info = calhijri.engine_info(CalendarSystem.FCNA)
    assert info["k_epoch"] == -17037
    assert info["max_year"] == 9665


def test_month_bounds():
    b = calhijri.month_bounds(1444, 9)
    assert b["days"] == 29
    assert b["first_date"] == date(2023, 3, 23)
    assert b["last_date"] == date(2023, 4, 20)
    assert b["calendar"] == "uaq"
    assert calhijri.first_day_of_month(1444, 10) == date(2023, 4, 21)
    assert calhijri.last_day_of_month(1444, 9) == date(2023, 4, 20)


def test_month_bounds_fcna():
    b = calhijri.month_bounds(1446, 9, calendar="fcna")
    assert b["first_date"] == date(2025, 3, 1)
    assert b["last_date"] == date(2025, 3, 29)


def test_make_engine_with_shorter_table():
    spec = UAQ.tweak(last_year=1450)
    eng = calhijri.make_engine(spec)
    assert isinstance(eng, UmmAlQuraEngine)
    assert eng.info()["last_year"] == 1450
    assert eng.to_hijri(date(2023, 3, 23)) == HijriDate(1444, 9, 1)
    assert not eng.is_valid(1451, 1, 1)


def test_uaq_params_validation():
    with pytest.raises(ValueError):
        UaqParams(last_year=1501)
    with pytest.raises(ValueError):
        UaqParams(last_year=1317)


def test_hijri_date_helpers():
    h = HijriDate(1444, 9, 1)
    assert h.astuple() == (1444, 9, 1)
    assert h.isoformat() == "1444-09-01"
    assert HijriDate(1444, 8, 30) < h


def test_import_builds_both_engines():
    # the package registers both calendars at import, over the packaged table
    assert calhijri.is_valid(1318, 1, 1)
    assert calhijri.is_valid(1343, 12, 30)
    assert calhijri.engine_info("fcna")["table_anchors"] is True
