import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.board.routes import router as board_router
from taskboard.api.status.routes import router as status_router
from taskboard.api.task.routes import router as task_router
from taskboard.api.subtask.routes import router as subtask_router
from taskboard.config import Settings, get_settings
from taskboard.core.error_handlers import register_error_handlers
from taskboard.core.logging import RequestLoggingMiddleware, setup_logging
from taskboard.db.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        database = Database.from_settings(settings)
        if settings.AUTO_CREATE_TABLES:
            database.create_all()
        app.state.db = database
        logger.info("Task board API started (env=%s)", settings.ENV)
        try:
            yield
        finally:
            logger.info("Task board API shutting down")
            database.dispose()

    app = FastAPI(
        title="Task Board API",
        version="1.0.0",
        description="Boards, ordered statuses, tasks and subtasks.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    prefix = settings.API_PREFIX
    app.include_router(board_router, prefix=f"{prefix}/boards", tags=["Boards"])
    app.include_router(status_router, prefix=f"{prefix}/boards/{{board_id}}/statuses", tags=["Board Statuses"])
    app.include_router(task_router, prefix=f"{prefix}/tasks", tags=["Tasks"])
    app.include_router(subtask_router, prefix=f"{prefix}/subtasks", tags=["SubTasks"])

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    register_error_handlers(app)
    return app


app = create_app()
