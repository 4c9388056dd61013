import pytest

from todo_store.core.models import Priority, QuerySort, Status
from todo_store.core.query import DEFAULT_LIMIT, MAX_LIMIT, matcher, result_limit, sort_key
from todo_store.core.schemas import Filter, Todo


def _todo(title: str, **kwargs) -> Todo:
    fields = dict(
        id=title,
        title=title,
        priority=Priority.MEDIUM,
        status=Status.BACKLOG,
        created_timestamp=0,
        updated_timestamp=0,
    )
    fields.update(kwargs)
    return Todo(**fields)


@pytest.mark.parametrize(
    "requested, expected",
    [
        (None, DEFAULT_LIMIT),
        (0, DEFAULT_LIMIT),
        (-3, DEFAULT_LIMIT),
        (1, 1),
        (MAX_LIMIT, MAX_LIMIT),
        (1000, MAX_LIMIT),
    ],
)
def test_result_limit(requested, expected) -> None:
    assert result_limit(requested) == expected


def test_enum_ordinals_follow_declaration_order() -> None:
    assert [p.rank for p in (Priority.LOW, Priority.MEDIUM, Priority.HIGH)] == [0, 1, 2]
    assert [s.rank for s in (Status.BACKLOG, Status.IN_PROGRESS, Status.DONE)] == [0, 1, 2]


def test_sort_key_by_deadline_puts_missing_deadlines_last() -> None:
    todos = [
        _todo("none"),
        _todo("late", deadline=200),
        _todo("early", deadline=100),
    ]

    ordered = sorted(todos, key=sort_key(QuerySort.DEADLINE))

    assert [t.title for t in ordered] == ["early", "late", "none"]


def test_sort_key_by_status_breaks_ties_by_title() -> None:
    todos = [
        _todo("b", status=Status.DONE),
        _todo("c", status=Status.BACKLOG),
        _todo("a", status=Status.DONE),
        _todo("d", status=Status.IN_PROGRESS),
    ]

    ordered = sorted(todos, key=sort_key(QuerySort.STATUS))

    assert [t.title for t in ordered] == ["c", "d", "a", "b"]


def test_matcher_combines_fields_with_and() -> None:
    matches = matcher(Filter(keyword="MILK", priority=Priority.HIGH), None)

    assert matches(_todo("buy milk", priority=Priority.HIGH))
    assert not matches(_todo("buy milk", priority=Priority.LOW))
    assert not matches(_todo("buy eggs", priority=Priority.HIGH))


def test_matcher_compares_deadline_for_equality() -> None:
    matches = matcher(Filter(), 100)

    assert matches(_todo("a", deadline=100))
    assert not matches(_todo("b", deadline=99))
    assert not matches(_todo("c"))
