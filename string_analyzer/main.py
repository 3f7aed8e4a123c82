from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

from string_analyzer.api.routes import router
from string_analyzer.config import configure_logging, get_settings
from string_analyzer.errors import ErrorKind, StringAnalyzerError
from string_analyzer.store import StringStore

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.WRONG_TYPE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.DUPLICATE_VALUE: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_FILTER_PARAM: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNRECOGNIZED_PHRASE: status.HTTP_400_BAD_REQUEST,
}


def error_body(kind: str, message: str) -> dict:
    return {"status": "error", "error": kind, "message": message}


# String analyzer error handler
async def string_analyzer_error_handler(request: Request, exc: StringAnalyzerError):
    status_code = ERROR_STATUS[exc.kind]
    logger.warning(f"{request.method} {request.url.path} -> {status_code} ({exc.kind.value}): {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.kind.value, exc.message),
    )


# Validation error handler
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        field = error["loc"][-1] if error.get("loc") else "body"
        details[str(field)] = error["msg"]

    logger.warning(f"{request.method} {request.url.path} -> 400 (validation): {details}")
    content = error_body("validation_error", "Invalid request body or parameters")
    content["details"] = details
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


# HTTPException handler
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body("http_error", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


# Generic error handler
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("internal_error", "Internal server error"),
    )


def create_app(store: Optional[StringStore] = None) -> FastAPI:
    """Build the application with its own (or the given) string store."""
    settings = get_settings()

    app = FastAPI(
        title="String Analyzer Service",
        description="Analyze and store string properties in memory",
        version="1.0.0",
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StringAnalyzerError, string_analyzer_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(router, tags=["strings"])
    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    logger.info(f"Server running on {settings.host}:{settings.port}")
    uvicorn.run("string_analyzer.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
