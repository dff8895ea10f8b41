"""Exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from framecut.application.commands import OptimizationFailedError
from framecut.application.config import ConfigError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(OptimizationFailedError)
    async def optimization_failed_handler(
        request: Request, exc: OptimizationFailedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.error.message,
                "error_type": exc.kind,
                "details": [
                    {
                        "frame_id": exc.error.frame_id,
                        "ref_no": exc.error.ref_no,
                        "sub_component": exc.error.sub_component,
                    }
                ],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
