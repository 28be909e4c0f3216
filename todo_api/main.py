import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.routes import todos, users
from todo_api.core.config import Settings, get_settings
from todo_api.core.errors import TodoApiError
from todo_api.core.logging_config import configure_logging
from todo_api.dao.base import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the in-memory store lives exactly as long as the app
    app.state.db = Database()
    logger.info("%s %s started", app.title, app.version)
    yield
    # Shutdown: nothing is persisted
    app.state.db.clear()
    logger.info("%s stopped", app.title)


# ── Error rendering: every error body is {"error": <message>} ─────────────────

async def handle_api_error(request: Request, exc: TodoApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request body."},
    )


async def handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ───────────────────────────────────────────────────────────────
    app.add_exception_handler(TodoApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(todos.router, prefix="/todos", tags=["Todos"])

    # ── Health check ─────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok", "version": settings.app_version}

    return app


app = create_app()
