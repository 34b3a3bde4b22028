"""FastAPI application main module."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from referent.config import get_settings
from referent.exceptions import ActionError
from referent.messages import message, resolve_language
from referent.middleware import RequestLoggingMiddleware
from referent.routers import actions, articles
from referent.utils.logging import setup_logging

settings = get_settings()
setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="Parse articles and summarise, translate or illustrate them with AI",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    logger.warning(
        f"{request.method} {request.url.path} failed: {exc.code}",
        extra={"status_code": exc.status_code, "error": exc.code},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = exc.body if isinstance(exc.body, dict) else {}
    language = resolve_language(body.get("targetLanguage"))
    logger.info(f"Rejected request body for {request.url.path}: {exc.errors()[:3]}")
    return JSONResponse(
        status_code=400,
        content={"error": "INVALID_INPUT", "message": message("invalid_input", language)},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}


app.include_router(articles.router)
app.include_router(actions.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
