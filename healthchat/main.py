# healthchat/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from healthchat.core.errors import ApiError
from healthchat.schemas.chat import ErrorResponse
from healthchat.api.routers.health import router as health_router
from healthchat.api.routers.chat import router as chat_router
from healthchat.api.routers.frontend import router as frontend_router

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body = ErrorResponse(error=exc.error, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON or a body that isn't an object; only /api/chat takes a body
    errors = exc.errors()
    details = errors[0].get("msg") if errors else None
    body = ErrorResponse(error="Message is required", details=details)
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


def create_app() -> FastAPI:
    app = FastAPI(title="Health Chat Server", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        logger.info("%s %s", request.method, url)
        return await call_next(request)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Routers; the frontend catch-all must stay last
    app.include_router(health_router)
    app.include_router(chat_router)
    app.include_router(frontend_router)

    return app


app = create_app()
