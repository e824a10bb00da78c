import pytest

from todo_agenda.dates import normalize_date


@pytest.mark.parametrize("value", ["2021-01-01", "2020-02-29", "1999-12-31", "0001-01-01"])
def test_valid_dates_are_fixed_points(value):
    formatted = normalize_date(value)
    assert formatted == value
    assert normalize_date(formatted) == formatted


@pytest.mark.parametrize(
    "value",
    [
        "2021-02-30",
        "2021-13-01",
        "2021-00-10",
        "2019-02-29",
        "abcd-ef-gh",
        "",
        "2021-1-5",
        "21-01-01",
        "2021/01/01",
        "2021-01-01T00:00:00",
        "2021-01-01 ",
        " 2021-01-01",
        "2021-01-01x",
        "２０２１-０１-０１",
    ],
)
def test_invalid_dates(value):
    assert normalize_date(value) is None


@pytest.mark.parametrize("value", [None, 20210101, ["2021-01-01"]])
def test_non_string_input_is_invalid(value):
    assert normalize_date(value) is None
