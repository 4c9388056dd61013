"""Pydantic response schemas for the Todo Store API."""

from pydantic import BaseModel

from todo_store.core.schemas import Todo


class TodoListResponse(BaseModel):
    todos: list[Todo]
    total: int


class CountResponse(BaseModel):
    count: int


class DeletedResponse(BaseModel):
    deleted: int


class TodoStatsResponse(BaseModel):
    total: int
    backlog: int
    in_progress: int
    done: int


class HealthResponse(BaseModel):
    status: str
    version: str
