"""Task Manager API - FastAPI app entry point."""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, get_settings
from app.core.errors import AppError, MalformedRequest
from app.core.logging_setup import setup_logging
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.routers import auth, tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create tables; an unusable database aborts startup here
    engine = app.state.engine
    Base.metadata.create_all(bind=engine)
    logger.info("storage ready at %s", engine.url.render_as_string(hide_password=True))

    yield

    engine.dispose()


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Malformed request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # malformed body / bad path id -> 400, not FastAPI's 422
        error = MalformedRequest(_validation_message(exc))
        return JSONResponse(status_code=error.status_code, content={"detail": error.detail})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "storage failure on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if settings.uses_default_secret:
        logger.warning("SECRET_KEY is not set; using the built-in placeholder secret")

    app = FastAPI(
        title=settings.app_name,
        description="Task list API with password login and token-gated routes",
        debug=settings.debug,
        lifespan=lifespan,
    )

    engine = build_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        logger.info(
            "%s %s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            client,
            response.status_code,
            elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(tasks.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
