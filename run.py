"""Entry point for the Hello API.

Starts the FastAPI application with Uvicorn. Host, port and log level
come from ``config.settings``, which reads ``HOST``, ``PORT`` and
``LOG_LEVEL`` from the environment or a local ``.env`` file.

Usage:
    python run.py
"""
import uvicorn

from config import settings


def main() -> None:
    """Serve ``app.main:app`` until interrupted."""
    uvicorn.run("app.main:app", reload=False, **settings.get_server_config())


if __name__ == "__main__":
    main()
