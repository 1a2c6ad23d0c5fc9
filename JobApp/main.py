from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Core imports
from packages.jp_core.config import JobAppConfig
from packages.jp_core.errors import JobAppBaseError
from packages.jp_core.logging import get_logger, setup_logging
from packages.jp_job.errors import JobPostNotFoundError
from packages.jp_job.models import default_job_posts
from packages.jp_job.repository import JobPostRepository, MemoryJobPostRepository

# API Routers
from JobApp.api.dependencies import load_config
from JobApp.api.health import router as health_router
from JobApp.api.job_post import router as job_post_router

logger = get_logger("JobApp.main")

def build_repository(config: JobAppConfig) -> JobPostRepository:
    """
    Fresh in-memory registry, seeded unless SEED_DEFAULT_JOBS is off.
    """
    initial = default_job_posts() if config.SEED_DEFAULT_JOBS else []
    return MemoryJobPostRepository(initial=initial)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    config: JobAppConfig = app.state.config
    logger.info(
        f"Starting {config.PROJECT_NAME} v{config.VERSION} "
        f"with {app.state.job_repository.count()} job posts..."
    )

    yield

    # Shutdown
    logger.info("Server shutting down...")

async def job_app_error_handler(request: Request, exc: JobAppBaseError) -> JSONResponse:
    if isinstance(exc, JobPostNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.error(f"Unhandled application error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"code": exc.code, "message": exc.message, "details": exc.details}
    )

def create_app(
    config: Optional[JobAppConfig] = None,
    repository: Optional[JobPostRepository] = None
) -> FastAPI:
    config = config or load_config()
    setup_logging(level=config.LOG_LEVEL, log_dir=config.LOG_DIR)

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None
    )

    # App-scoped state
    app.state.config = config
    app.state.job_repository = repository if repository is not None else build_repository(config)

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(JobAppBaseError, job_app_error_handler)

    # Routers
    app.include_router(health_router, prefix="", tags=["Status"])
    app.include_router(job_post_router, prefix="")

    return app

def run():
    import uvicorn

    config = load_config()
    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    run()
