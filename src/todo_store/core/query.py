"""Filter predicates, sort keys and result limits for search/count."""

from __future__ import annotations

from typing import Callable

from todo_store.core.models import QuerySort
from todo_store.core.schemas import Filter, Todo

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

SortKey = Callable[[Todo], tuple]


def result_limit(limit: int | None) -> int:
    """Clamp a requested limit to ``1..MAX_LIMIT``; missing or < 1 means default."""
    if limit is None or limit < 1:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def matcher(criteria: Filter, deadline: int | None) -> Callable[[Todo], bool]:
    """Build an AND-combined predicate from the supplied filter fields.

    ``deadline`` is the already parsed form of ``criteria.deadline``.
    """
    keyword = criteria.keyword.casefold() if criteria.keyword is not None else None

    def matches(todo: Todo) -> bool:
        if keyword is not None and keyword not in todo.title.casefold():
            return False
        if criteria.priority is not None and todo.priority != criteria.priority:
            return False
        if criteria.status is not None and todo.status != criteria.status:
            return False
        if deadline is not None and todo.deadline != deadline:
            return False
        return True

    return matches


def sort_key(sort: QuerySort | None) -> SortKey:
    """Return a key function ordering by ``sort`` then by title."""
    if sort is QuerySort.PRIORITY:
        return lambda t: (t.priority.rank, t.title)
    if sort is QuerySort.STATUS:
        return lambda t: (t.status.rank, t.title)
    if sort is QuerySort.DEADLINE:
        # no deadline sorts last
        return lambda t: (t.deadline is None, t.deadline or 0, t.title)
    return lambda t: (t.title,)
