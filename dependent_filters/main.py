from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from dependent_filters.config import get_settings
from dependent_filters.core.routes import router as filters_router
from dependent_filters.exceptions import add_exception_handlers
from dependent_filters.health import router as health_check_router
from dependent_filters.lifespan import lifespan
from dependent_filters.utilities.logger import setup_rich_logger
from dependent_filters.utilities.middleware import process_time_log_middleware, request_id_middleware


def get_application() -> FastAPI:
    settings = get_settings()

    _app = FastAPI(
        title="Dependent Filters",
        description="Option resolution for admin panel filters depending on other filters",
        debug=settings.DEBUG,
        root_path=settings.URL_PREFIX,
        lifespan=lifespan,
    )
    _app.include_router(health_check_router)
    _app.include_router(filters_router)
    _app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    # add request id middleware
    _app.add_middleware(BaseHTTPMiddleware, dispatch=request_id_middleware)

    # add process time log middleware
    _app.add_middleware(BaseHTTPMiddleware, dispatch=process_time_log_middleware)

    # setup logging
    setup_rich_logger(settings)

    # add exception handlers
    add_exception_handlers(_app)

    return _app


app = get_application()
