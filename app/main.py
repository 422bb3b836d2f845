import json
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.endpoints import forms, submissions
from app.core.config import settings
from app.core.exceptions import IntakeError, MethodError, UnexpectedError, ValidationError
from app.core.logging import setup_logging

setup_logging()

logger = logging.getLogger(__name__)

with open(os.path.join(os.path.dirname(__file__), "log_config.json"), "r") as file:
    LOGGING_CONFIG = json.load(file)


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Lead capture API for the SecurePrimedex marketing website",
    version="0.1.0",
    debug=settings.DEBUG,
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    for header, value in settings.CORS_HEADERS.items():
        response.headers[header] = value
    return response


app.include_router(
    submissions.router,
    prefix=settings.API_V1_STR,
    tags=["submissions"],
)

app.include_router(
    forms.router,
    prefix=f"{settings.API_V1_STR}/forms",
    tags=["forms"],
)


@app.get("/", tags=["status"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME}


@app.exception_handler(IntakeError)
async def intake_exception_handler(request: Request, exc: IntakeError):
    if not isinstance(exc, ValidationError):
        logger.warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return await intake_exception_handler(request, MethodError())
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = UnexpectedError()
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_payload(),
        headers=settings.CORS_HEADERS,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_config=LOGGING_CONFIG,
    )
