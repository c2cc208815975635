# tests/test_cli.py

from nongli.cli import main


def test_year(capsys):
    assert main(["year", "2023"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "2023"
    assert "閏二月" in out
    assert "正月" in out


def test_date_shorthand(capsys):
    assert main(["2023-01-22", "--attr", "sexagenary_day"]) == 0
    out = capsys.readouterr().out
    assert "lunar_year=2023" in out
    assert "庚辰" in out


def test_deltat(capsys):
    assert main(["deltat", "--jd", "2451545"]) == 0
    assert "64.700 s" in capsys.readouterr().out


def test_terms_utc(capsys):
    assert main(["terms", "2023", "--utc"]) == 0
    out = capsys.readouterr().out
    assert "春分 : 2023-03-20 21:2" in out
