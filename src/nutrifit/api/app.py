"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrifit.api.reference import router as reference_router
from nutrifit.api.users import router as users_router
from nutrifit.app_logging import configure_logging
from nutrifit.containers import AppContainer
from nutrifit.domain.errors import DiaryConflictError, InvalidInputError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriFit")
    app.state.container = container

    app.include_router(reference_router)
    app.include_router(users_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("Rejected input: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": [{"field": exc.field, "message": exc.message}]},
        )

    @app.exception_handler(DiaryConflictError)
    async def diary_conflict(
        _request: Request, exc: DiaryConflictError
    ) -> JSONResponse:
        logger.warning("Diary write conflict: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
