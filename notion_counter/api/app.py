"""FastAPI application configuration."""

import logging

from fastapi import FastAPI

from notion_counter import __version__
from notion_counter.api.count import router as count_router
from notion_counter.api.errors import register_exception_handlers
from notion_counter.api.models import ErrorResponse
from notion_counter.observability.sentry import init_sentry
from notion_counter.utils.logging import configure_logging

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Notion Finished Counter",
        version=__version__,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    application.include_router(count_router)
    register_exception_handlers(application)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn and the serverless entrypoint
app = create_app()
