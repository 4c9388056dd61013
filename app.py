"""Uvicorn entry point for Todo Store."""

import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from todo_store.api.main import app  # noqa: E402
from todo_store.config import get_settings  # noqa: E402

if __name__ == "__main__":
    import uvicorn

    server = get_settings().server
    uvicorn.run(app, host=server.host, port=server.port)
