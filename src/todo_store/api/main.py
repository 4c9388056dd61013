"""FastAPI host adapter for Todo Store."""

from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from todo_store import __version__
from todo_store.api.schemas import (
    CountResponse,
    DeletedResponse,
    HealthResponse,
    TodoListResponse,
    TodoStatsResponse,
)
from todo_store.config import configure_logging
from todo_store.core.errors import NotFoundError, ValidationError
from todo_store.core.models import Priority, QuerySort, Status
from todo_store.core.schemas import (
    Filter,
    MetaData,
    NewTodo,
    Query,
    Todo,
    UpdateTodo,
)
from todo_store.store import TodoStore, get_store

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("todo_store_started", version=__version__)
    yield


app = FastAPI(
    title="Todo Store API",
    description="Single-tenant todo list with filtering, search and sorting",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def filter_params(
    keyword: str | None = None,
    priority: Priority | None = None,
    status: Status | None = None,
    deadline: str | None = None,
) -> Filter:
    return Filter(keyword=keyword, priority=priority, status=status, deadline=deadline)


@app.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/meta", response_model=MetaData)
def meta(store: TodoStore = Depends(get_store)) -> MetaData:
    return store.meta()


@app.post("/api/todos", response_model=Todo, status_code=201)
def add_todo(body: NewTodo, store: TodoStore = Depends(get_store)) -> Todo:
    return store.add(body)


@app.get("/api/todos", response_model=TodoListResponse)
def search_todos(
    criteria: Filter = Depends(filter_params),
    sort: QuerySort | None = None,
    limit: int | None = None,
    store: TodoStore = Depends(get_store),
) -> TodoListResponse:
    query = Query(**criteria.model_dump(), sort=sort, limit=limit)
    todos = store.search(query)
    return TodoListResponse(todos=todos, total=len(todos))


@app.get("/api/todos/count", response_model=CountResponse)
def count_todos(
    criteria: Filter = Depends(filter_params),
    store: TodoStore = Depends(get_store),
) -> CountResponse:
    return CountResponse(count=store.count_by(criteria))


@app.get("/api/stats", response_model=TodoStatsResponse)
def get_stats(store: TodoStore = Depends(get_store)) -> TodoStatsResponse:
    return TodoStatsResponse(
        total=store.count_all(),
        backlog=store.count_by(Filter(status=Status.BACKLOG)),
        in_progress=store.count_by(Filter(status=Status.IN_PROGRESS)),
        done=store.count_by(Filter(status=Status.DONE)),
    )


@app.delete("/api/todos/done", response_model=DeletedResponse)
def delete_done_todos(store: TodoStore = Depends(get_store)) -> DeletedResponse:
    return DeletedResponse(deleted=store.delete_done_items())


@app.delete("/api/todos", response_model=DeletedResponse)
def delete_all_todos(store: TodoStore = Depends(get_store)) -> DeletedResponse:
    return DeletedResponse(deleted=store.delete_all())


@app.get("/api/todos/{todo_id}", response_model=Todo)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> Todo:
    return store.get(todo_id)


@app.put("/api/todos/{todo_id}", response_model=Todo)
def update_todo(
    todo_id: str, body: UpdateTodo, store: TodoStore = Depends(get_store)
) -> Todo:
    return store.update(todo_id, body)


@app.delete("/api/todos/{todo_id}", status_code=204)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    store.delete(todo_id)
