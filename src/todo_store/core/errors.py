"""Errors raised by the todo store."""


class TodoStoreError(Exception):
    """Base class for todo store errors."""


class ValidationError(TodoStoreError):
    """Malformed input: bad title, unparseable deadline, invalid enum value."""


class NotFoundError(TodoStoreError):
    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__(f"Item with ID '{todo_id}' not found.")
