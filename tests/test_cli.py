# tests/test_cli.py

from calhijri.cli import main


def test_to_hijri(capsys):
    assert main(["to-hijri", "2023-03-23"]) == 0
    assert capsys.readouterr().out.strip() == "1444-09-01"


def test_date_shortcut_with_format(capsys):
    assert main(["2023-03-23", "--format", "iD iMMMM iYYYY ioooo"]) == 0
    assert capsys.readouterr().out.strip() == "1 Ramadan 1444 AH"


def test_to_hijri_outside_table(capsys):
    assert main(["to-hijri", "1800-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "no result"


def test_to_hijri_bad_date(capsys):
    assert main(["to-hijri", "2023-02-30"]) == 1
    assert "error" in capsys.readouterr().err


def test_to_gregorian(capsys):
    assert main(["to-gregorian", "1446", "9", "1", "--calendar", "fcna"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-01"


def test_to_gregorian_invalid(capsys):
    assert main(["to-gregorian", "1444", "9", "30"]) == 1
    assert "error" in capsys.readouterr().err


def test_month(capsys):
    assert main(["month", "1444", "9"]) == 0
    out = capsys.readouterr().out
    assert "Ramadan 1444 AH" in out
    assert "2023-03-23" in out
    assert "29 days" in out


def test_month_fcna_debug(capsys):
    assert main(["month", "1446", "9", "--calendar", "fcna", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "k         : 311" in out
    assert "2025-02-28" in out


def test_new_moon(capsys):
    assert main(["new-moon", "-283"]) == 0
    assert "2443192.65" in capsys.readouterr().out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "50", "--start", "2020-01-01", "--end", "2026-12-31"]) == 0
    out = capsys.readouterr().out
    assert "uaq: N=50 failures=0" in out
    assert "fcna: N=50 failures=0" in out


def test_diag_compare(capsys):
    assert main(["diag", "compare", "--from-year", "1446", "--to-year", "1446", "--quiet"]) == 0
    assert "12 months" in capsys.readouterr().out


def test_format_preset_name(capsys):
    assert main(["to-hijri", "2023-03-23", "--format", "full"]) == 0
    assert capsys.readouterr().out.strip() == "Yawm al-Khamis, 1 Ramadan 1444 AH"
