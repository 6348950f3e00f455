from datetime import date

import pytest

from shamsi_calendar import cli
from shamsi_calendar.api.converter import JalaliDate

TODAY = date(2025, 4, 1)  # 1404-01-12


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("SCAL_COLOR", "never")


def test_current_jalali_date_uses_given_day():
    assert cli.current_jalali_date(TODAY) == JalaliDate(1404, 1, 12)


@pytest.mark.parametrize(
    "argv,expected",
    [
        ([], cli.DisplayMode.SINGLE_MONTH),
        (["-m", "5"], cli.DisplayMode.SINGLE_MONTH),
        (["-y", "1400", "-m", "5"], cli.DisplayMode.SINGLE_MONTH),
        (["-y", "1400"], cli.DisplayMode.FULL_YEAR),
        (["-Y"], cli.DisplayMode.FULL_YEAR),
        (["-3"], cli.DisplayMode.THREE_MONTHS),
        (["-3", "-Y"], cli.DisplayMode.FULL_YEAR),
        (["-y", "1400", "--three"], cli.DisplayMode.THREE_MONTHS),
    ],
)
def test_determine_display_mode(argv, expected):
    args = cli.build_parser().parse_args(argv)
    assert cli.determine_display_mode(args) is expected


def test_defaults_to_current_month(capsys):
    assert cli.main([], today=TODAY) == 0
    output = capsys.readouterr().out
    assert output.splitlines()[0].strip() == "Farvardin 1404"


def test_explicit_month_and_year(capsys):
    assert cli.main(["-y", "1399", "-m", "12"], today=TODAY) == 0
    output = capsys.readouterr().out
    assert output.splitlines()[0].strip() == "Esfand 1399"
    assert "30" in output


def test_three_months_around_new_year(capsys):
    cli.main(["-3", "-y", "1404", "-m", "1"], today=TODAY)
    first_line = capsys.readouterr().out.splitlines()[0]
    assert first_line.split() == ["Esfand", "Farvardin", "Ordibehesht"]


def test_full_year(capsys):
    cli.main(["-y", "1404"], today=TODAY)
    output = capsys.readouterr().out
    assert output.splitlines()[0].strip() == "1404"
    assert "Esfand" in output


@pytest.mark.parametrize(
    "argv,message",
    [
        (["-m", "13"], "month must be between 1 and 12"),
        (["-m", "0"], "month must be between 1 and 12"),
        (["-y", "10000", "-m", "1"], "year must be between 1 and 9999"),
        (["-y", "0", "-m", "1"], "year must be between 1 and 9999"),
    ],
)
def test_validation_errors(argv, message, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv, today=TODAY)
    assert excinfo.value.code == 2
    assert f"validation error: {message}" in capsys.readouterr().err


def test_validate_input_accepts_bounds():
    cli.validate_input(1, 1)
    cli.validate_input(9999, 12)


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert "scal" in capsys.readouterr().out
