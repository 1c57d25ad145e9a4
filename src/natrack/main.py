"""Command-line entrypoint serving the API with uvicorn."""

import uvicorn

from natrack.api.app import create_app
from natrack.config import Settings
from natrack.containers import build_container


def main() -> None:
    """Build the app from environment settings and serve it."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
