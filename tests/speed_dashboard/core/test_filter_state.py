from __future__ import annotations

from speed_dashboard.core.filter_state import ALL_REGIONS, FilterState, is_all_regions, normalize_filters

YEARS = ["2017", "2018", "2019", "2020", "2021", "2022", "2023", "2024"]


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(countries=["Alpha", "Beta"], region="R1", year="2023", top_n=5)

    rebuilt = FilterState.from_dict(st.to_dict())

    assert rebuilt == st


def test_filter_state_defaults():
    st = FilterState.from_dict({})

    assert st.countries == []
    assert st.region == ALL_REGIONS
    assert st.year is None
    assert st.top_n == 10


def test_is_all_regions():
    assert is_all_regions("All")
    assert is_all_regions("all")
    assert is_all_regions("")
    assert is_all_regions(None)
    assert not is_all_regions("Europe")


def test_normalize_filters_falls_back_to_defaults():
    st = normalize_filters(None, available_years=YEARS, default_year="2024")

    assert st == FilterState(countries=[], region=ALL_REGIONS, year="2024", top_n=10)


def test_normalize_filters_coerces_values():
    st = normalize_filters(
        {
            "countries": ["Beta", None, "Alpha", "Beta", " "],
            "region": " R1 ",
            "year": 2019,
            "top_n": "5",
        },
        available_years=YEARS,
        default_year="2024",
    )

    assert st.countries == ["Beta", "Alpha"]
    assert st.region == "R1"
    assert st.year == "2019"
    assert st.top_n == 5


def test_normalize_filters_rejects_malformed_values():
    st = normalize_filters(
        {"region": "all", "year": "1999", "top_n": "lots"},
        available_years=YEARS,
        default_year="2023",
    )

    assert st.region == ALL_REGIONS
    assert st.year == "2023"
    assert st.top_n == 10


def test_normalize_filters_top_n_bounds():
    assert normalize_filters({"top_n": 0}, available_years=YEARS).top_n == 10
    assert normalize_filters({"top_n": -4}, available_years=YEARS).top_n == 10
    assert normalize_filters({"top_n": 5000}, available_years=YEARS).top_n == 200


def test_normalize_filters_unknown_default_year_uses_last_year():
    st = normalize_filters({"year": None}, available_years=YEARS, default_year="1990")
    assert st.year == "2024"
