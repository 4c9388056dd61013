"""In-memory todo collection with CRUD and query operations."""

from __future__ import annotations

import heapq
import time
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, TypeVar
from uuid import uuid4

import pydantic
import structlog

from todo_store import SCHEMA_VERSION, __version__
from todo_store.config import get_settings
from todo_store.core.deadline import parse_deadline
from todo_store.core.errors import NotFoundError, TodoStoreError, ValidationError
from todo_store.core.models import Priority, Status
from todo_store.core.query import matcher, result_limit, sort_key
from todo_store.core.schemas import (
    Filter,
    MetaData,
    NewTodo,
    Query,
    Todo,
    UpdateTodo,
)

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)
EnumT = TypeVar("EnumT", bound=Enum)


def _unix_now() -> int:
    return int(time.time())


def _new_id() -> str:
    return str(uuid4())


def _coerce(model: type[ModelT], payload: ModelT | Mapping[str, Any]) -> ModelT:
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        logger.info("todo_validation_failed", payload=model.__name__, error=str(e))
        raise ValidationError(str(e)) from e


class TodoStore:
    """Todo records keyed by id, in insertion order.

    ``clock`` returns unix seconds and ``id_factory`` returns fresh ids; both
    default to wall-clock time and uuid4.
    """

    def __init__(
        self,
        clock: Callable[[], int] = _unix_now,
        id_factory: Callable[[], str] = _new_id,
        title_max_length: int | None = None,
    ):
        self._clock = clock
        self._id_factory = id_factory
        if title_max_length is None:
            title_max_length = get_settings().store.title_max_length
        self._title_max_length = title_max_length
        self._todos: dict[str, Todo] = {}
        self._issued_ids: set[str] = set()

    # --- Validation ---

    def _validated_title(self, title: str) -> str:
        title = title.strip()
        if not title:
            raise ValidationError("Title cannot be empty.")
        if len(title) > self._title_max_length:
            raise ValidationError(
                f"The provided title '{title}' exceeds max "
                f"{self._title_max_length} characters."
            )
        return title

    def _next_id(self) -> str:
        todo_id = self._id_factory()
        if todo_id in self._issued_ids:
            raise TodoStoreError(f"Id generator returned already issued id '{todo_id}'.")
        self._issued_ids.add(todo_id)
        return todo_id

    def _lookup(self, todo_id: str) -> Todo:
        todo = self._todos.get(todo_id)
        if todo is None:
            logger.info("todo_not_found", id=todo_id)
            raise NotFoundError(todo_id)
        return todo

    # --- Todo CRUD ---

    def add(self, item: NewTodo | Mapping[str, Any]) -> Todo:
        item = _coerce(NewTodo, item)
        title = self._validated_title(item.title)
        deadline = parse_deadline(item.deadline)

        now = self._clock()
        todo = Todo(
            id=self._next_id(),
            title=title,
            priority=item.priority,
            status=Status.BACKLOG,
            created_timestamp=now,
            updated_timestamp=now,
            deadline=deadline,
        )
        self._todos[todo.id] = todo
        logger.info("todo_added", id=todo.id, priority=todo.priority.value)
        return todo

    def update(self, todo_id: str, change: UpdateTodo | Mapping[str, Any]) -> Todo:
        change = _coerce(UpdateTodo, change)
        todo = self._lookup(todo_id)

        updates: dict[str, Any] = {}
        for field in ("title", "priority", "status"):
            value = getattr(change, field)
            if field in change.model_fields_set and value is not None:
                updates[field] = value
        if "deadline" in change.model_fields_set:
            updates["deadline"] = parse_deadline(change.deadline)
        if not updates:
            raise ValidationError("At least one change must be present.")
        if "title" in updates:
            updates["title"] = self._validated_title(updates["title"])

        updates["updated_timestamp"] = max(self._clock(), todo.updated_timestamp)
        updated = todo.model_copy(update=updates)
        self._todos[todo_id] = updated
        logger.info("todo_updated", id=todo_id, fields=sorted(updates))
        return updated

    def get(self, todo_id: str) -> Todo:
        return self._lookup(todo_id)

    def delete(self, todo_id: str) -> None:
        self._lookup(todo_id)
        del self._todos[todo_id]
        logger.info("todo_deleted", id=todo_id)

    # --- Queries ---

    def _filtered(self, criteria: Filter) -> Iterable[Todo]:
        matches = matcher(criteria, parse_deadline(criteria.deadline))
        return (t for t in self._todos.values() if matches(t))

    def search(self, query: Query | Mapping[str, Any]) -> list[Todo]:
        query = _coerce(Query, query)
        found = self._filtered(query)
        return heapq.nsmallest(
            result_limit(query.limit), found, key=sort_key(query.sort)
        )

    def count_by(self, criteria: Filter | Mapping[str, Any]) -> int:
        criteria = _coerce(Filter, criteria)
        return sum(1 for _ in self._filtered(criteria))

    def count_all(self) -> int:
        return len(self._todos)

    # --- Bulk deletes ---

    def _delete_where(self, should_delete: Callable[[Todo], bool], reason: str) -> int:
        doomed = [todo_id for todo_id, t in self._todos.items() if should_delete(t)]
        for todo_id in doomed:
            del self._todos[todo_id]
        logger.info("todos_bulk_deleted", reason=reason, count=len(doomed))
        return len(doomed)

    def delete_by_ids(self, ids: Iterable[str]) -> int:
        targets = set(ids)
        return self._delete_where(lambda t: t.id in targets, "ids")

    def delete_by_priorities(self, priorities: Iterable[Priority | str]) -> int:
        targets = _members(Priority, priorities)
        return self._delete_where(lambda t: t.priority in targets, "priorities")

    def delete_by_statuses(self, statuses: Iterable[Status | str]) -> int:
        targets = _members(Status, statuses)
        return self._delete_where(lambda t: t.status in targets, "statuses")

    def delete_done_items(self) -> int:
        return self.delete_by_statuses([Status.DONE])

    def delete_all(self) -> int:
        count = len(self._todos)
        self._todos.clear()
        logger.info("todos_bulk_deleted", reason="all", count=count)
        return count

    def meta(self) -> MetaData:
        return MetaData(component_version=__version__, schema_version=SCHEMA_VERSION)


def _members(enum: type[EnumT], values: Iterable[Any]) -> set[EnumT]:
    try:
        return {enum(v) for v in values}
    except ValueError as e:
        raise ValidationError(str(e)) from e


_store: TodoStore | None = None


def get_store() -> TodoStore:
    global _store
    if _store is None:
        _store = TodoStore()
    return _store
