"""Pydantic payloads for Todo Store operations."""

from pydantic import BaseModel, ConfigDict

from todo_store.core.models import Priority, QuerySort, Status


class NewTodo(BaseModel):
    title: str
    priority: Priority
    deadline: str | None = None


class UpdateTodo(BaseModel):
    title: str | None = None
    priority: Priority | None = None
    status: Status | None = None
    deadline: str | None = None


class Filter(BaseModel):
    keyword: str | None = None
    priority: Priority | None = None
    status: Status | None = None
    deadline: str | None = None


class Query(Filter):
    sort: QuerySort | None = None
    limit: int | None = None


class Todo(BaseModel):
    """A todo item as handed out by the store."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    priority: Priority
    status: Status
    created_timestamp: int
    updated_timestamp: int
    deadline: int | None = None


class MetaData(BaseModel):
    component_version: str
    schema_version: int
