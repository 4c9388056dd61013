import pytest

from todo_store.core.deadline import DEADLINE_FORMAT, parse_deadline
from todo_store.core.errors import ValidationError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2022-01-01 09", 1641027600),
        ("1970-01-01 00", 0),
    ],
)
def test_parse_deadline_returns_unix_seconds(value, expected) -> None:
    assert parse_deadline(value) == expected


def test_parse_deadline_passes_none_through() -> None:
    assert parse_deadline(None) is None


@pytest.mark.parametrize("value", ["2022-01-01", "abc", "", "2022-01-01 09:30"])
def test_parse_deadline_rejects_other_formats(value) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_deadline(value)

    assert f"'{value}'" in str(exc_info.value)
    assert DEADLINE_FORMAT in str(exc_info.value)
