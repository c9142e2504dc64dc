# visadesk/errors.py
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarHTTP
import logging

from .engine.errors import ValidationError, VisaEngineError
from .logging_config import log_failure

logger = logging.getLogger("visadesk")

ENGINE_STATUS = {
    "VALIDATION_ERROR": 422,
    "UNKNOWN_SCHEME": 400,
    "CONFIGURATION_ERROR": 400,
}


def install_error_handlers(app):
    @app.exception_handler(StarHTTP)
    async def http_exc(_: Request, exc: StarHTTP):
        return JSONResponse({"error": f"HTTP_{exc.status_code}", "detail": exc.detail}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_invalid(_: Request, exc: RequestValidationError):
        # body shape errors use the same envelope as profile errors
        err = ValidationError.from_pydantic(exc)
        log_failure(err.kind, err.to_dict())
        return JSONResponse(err.to_dict(), status_code=422)

    @app.exception_handler(VisaEngineError)
    async def engine_exc(_: Request, exc: VisaEngineError):
        return JSONResponse(exc.to_dict(), status_code=ENGINE_STATUS.get(exc.kind, 400))

    @app.exception_handler(Exception)
    async def unhandled(_: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse({"error": "INTERNAL_ERROR", "detail": "Unexpected error"}, status_code=500)
