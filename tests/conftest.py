from __future__ import annotations

from itertools import count

import pytest
from fastapi.testclient import TestClient

from todo_store.api.main import app
from todo_store.store import TodoStore, get_store


class FakeClock:
    def __init__(self, now: int = 1_700_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TodoStore:
    ids = count(1)
    return TodoStore(
        clock=clock,
        id_factory=lambda: f"todo-{next(ids)}",
        title_max_length=20,
    )


@pytest.fixture()
def client(store: TodoStore):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
