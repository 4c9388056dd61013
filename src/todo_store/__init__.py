"""In-memory todo list store with filtering, keyword search and sorting."""

__version__ = "0.1.0"

SCHEMA_VERSION = 1
