"""Run the API with uvicorn: `python -m student_api`."""

import logging

import uvicorn

from .config import settings
from .main import app

logger = logging.getLogger("student_api.api")


def run() -> None:
    """Serve the application on the configured host and port."""
    logger.info("API running on %s", settings.PUBLIC_URL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
