# tests/test_year_table.py

from datetime import date, timedelta

import pytest
from hijridate import Hijri

from calhijri.core.errors import YearTableError
from calhijri.core.types import YearRecord
from calhijri.engines.year_table import (
    YearTable,
    bounded_search,
    load_year_table,
    read_year_rows,
    with_sentinel,
)

# Years whose hijridate data has 28- or 31-day months; the packaged table
# spreads those days over 29/30-day months and keeps 1 Muharram and 1 Ramadan.
IRREGULAR_YEARS = {1343, 1345, 1348, 1349, 1364}


def _synthetic(n=3, start=date(2000, 1, 1), mask=0b101010101010):
    recs = []
    d = start
    for i in range(n):
        r = YearRecord(hy=100 + i, month_mask=mask, start=d)
        recs.append(r)
        d = d + timedelta(days=r.year_length)
    return recs


def test_standard_table_extent():
    t = load_year_table()
    assert t.first_year == 1318
    assert t.last_year == 1500
    assert len(t) == 183
    assert t.first_day == date(1900, 4, 30)
    assert t.end_day == date(2077, 11, 17)


def test_sentinel_is_hidden():
    t = load_year_table()
    assert all(not r.is_sentinel for r in t)
    assert t.find_year(1501) is None
    assert 1501 not in t
    assert 1500 in t
    assert t.find_containing(date(2077, 11, 17)) is None
    assert t.find_containing(date(2077, 11, 16)).hy == 1500


def test_year_lengths_and_continuity():
    t = load_year_table()
    recs = list(t)
    for prev, cur in zip(recs, recs[1:]):
        assert 353 <= prev.year_length <= 356
        assert cur.start == prev.start + timedelta(days=prev.year_length)


def test_packaged_rows():
    rows = read_year_rows("uaq_years.csv")
    assert len(rows) == 184
    assert rows[0] == YearRecord(1318, rows[0].month_mask, date(1900, 4, 30))
    assert rows[-1] == YearRecord(1501, 0, date(2077, 11, 17))
    assert all(0 < r.month_mask <= 0xFFF for r in rows[:-1])


def test_year_starts_match_hijridate():
    t = load_year_table()
    for hy in range(1343, 1501):
        g = Hijri(hy, 1, 1).to_gregorian()
        assert t.find_year(hy).start == date(g.year, g.month, g.day)


def test_month_lengths_match_hijridate():
    t = load_year_table()
    for hy in range(1343, 1501):
        if hy in IRREGULAR_YEARS:
            continue
        rec = t.find_year(hy)
        for hm in range(1, 13):
            assert rec.month_length(hm) == Hijri(hy, hm, 1).month_length()


@pytest.mark.parametrize("hy", sorted(IRREGULAR_YEARS))
def test_irregular_years_stay_within_a_day(hy):
    rec = load_year_table().find_year(hy)
    assert Hijri(hy, 9, 1).to_gregorian() == rec.start + timedelta(days=rec.days_before_month(9))
    for hm in range(1, 13):
        g = Hijri(hy, hm, 1).to_gregorian()
        ours = rec.start + timedelta(days=rec.days_before_month(hm))
        assert abs((date(g.year, g.month, g.day) - ours).days) <= 1


def test_find_containing_floor():
    t = load_year_table()
    assert t.find_containing(date(1900, 4, 29)) is None
    assert t.find_containing(date(1900, 4, 30)).hy == 1318
    assert t.find_containing(date(2023, 3, 23)).hy == 1444
    assert t.find_containing(date(2022, 7, 29)).hy == 1443
    assert t.find_containing(date(2022, 7, 30)).hy == 1444


def test_bounded_search_modes():
    recs = with_sentinel(_synthetic(3))
    by_year = lambda r: r.hy
    assert bounded_search(recs, 101, key=by_year, mode="exact") == 1
    assert bounded_search(recs, 99, key=by_year, mode="exact") is None
    # sentinel year 103 exists in the list but is never returned
    assert bounded_search(recs, 103, key=by_year, mode="exact") is None
    assert bounded_search(recs, 500, key=by_year, mode="floor") is None

    by_start = lambda r: r.start
    assert bounded_search(recs, date(1999, 12, 31), key=by_start, mode="floor") is None
    assert bounded_search(recs, recs[1].start + timedelta(days=10), key=by_start, mode="floor") == 1


def test_synthetic_table_ok():
    t = YearTable(with_sentinel(_synthetic(3)))
    assert len(t) == 3
    assert t.first_year == 100
    assert t.last_year == 102


def test_missing_sentinel_rejected():
    with pytest.raises(YearTableError):
        YearTable(_synthetic(3))


def test_too_short_rejected():
    with pytest.raises(YearTableError):
        YearTable([])


def test_gap_in_years_rejected():
    recs = with_sentinel(_synthetic(3))
    broken = [recs[0], YearRecord(hy=105, month_mask=recs[1].month_mask, start=recs[1].start), *recs[2:]]
    with pytest.raises(YearTableError):
        YearTable(broken)


def test_start_discontinuity_rejected():
    recs = with_sentinel(_synthetic(3))
    shifted = YearRecord(hy=recs[2].hy, month_mask=recs[2].month_mask, start=recs[2].start + timedelta(days=1))
    with pytest.raises(YearTableError):
        YearTable([recs[0], recs[1], shifted, recs[3]])


def test_bad_mask_rejected():
    recs = _synthetic(2, mask=0x1000)
    with pytest.raises(YearTableError):
        YearTable(with_sentinel(recs))
