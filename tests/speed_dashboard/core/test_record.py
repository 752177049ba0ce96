import pytest

from speed_dashboard.core.numeric import clamp_int, format_mbps, parse_speed, previous_year
from speed_dashboard.core.record import YEARS, Record, normalize_row


def _row(country, region="R1", major_area="A1", **values):
    row = {"country": country, "region": region, "major_area": major_area}
    for year, value in values.items():
        row[f"year {year.lstrip('y')}"] = value
    return row


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", 12.5),
        (" 7 ", 7.0),
        (3, 3.0),
        ("0", 0.0),
        ("", None),
        ("   ", None),
        ("n/a", None),
        ("-3", None),
        ("inf", None),
        (float("nan"), None),
        (None, None),
    ],
)
def test_parse_speed(raw, expected):
    assert parse_speed(raw) == expected


def test_normalize_row_parses_every_year():
    record = normalize_row(_row("Alpha", y2023="10", y2024="15.5"))

    assert isinstance(record, Record)
    assert record.country == "Alpha"
    assert record.region == "R1"
    assert record.major_area == "A1"

    # fixed year set, missing columns become None (not 0)
    assert list(record.values) == list(YEARS)
    assert record.value("2023") == 10.0
    assert record.value("2024") == 15.5
    assert record.value("2017") is None


def test_normalize_row_bad_cells_become_missing():
    record = normalize_row(_row("Alpha", y2020="abc", y2021="-1", y2022="", y2023="0"))

    assert record.value("2020") is None
    assert record.value("2021") is None
    assert record.value("2022") is None
    assert record.value("2023") == 0.0
    assert record.has_value("2023")


@pytest.mark.parametrize("country", [None, "", "   ", float("nan")])
def test_normalize_row_drops_rows_without_country(country):
    assert normalize_row(_row(country, y2024="50")) is None


def test_normalize_row_custom_years_and_prefix():
    row = {"country": "Alpha", "region": "R1", "speed_2030": "9"}
    record = normalize_row(row, years=("2030",), year_prefix="speed_")

    assert dict(record.values) == {"2030": 9.0}
    assert record.major_area == ""


def test_record_values_are_read_only():
    record = normalize_row(_row("Alpha", y2024="15"))

    with pytest.raises(TypeError):
        record.values["2024"] = 99.0


def test_numeric_helpers():
    assert previous_year("2017") == "2016"
    assert previous_year("latest") is None

    assert format_mbps(None) == "n/a"
    assert format_mbps(1234.56) == "1,234.6 Mbps"
    assert clamp_int("7", 10, 1, 5) == 5
    assert clamp_int("x", 10, 1, 5) == 10
    assert clamp_int(None, 10, 1, 5) == 10
