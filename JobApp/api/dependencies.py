from functools import lru_cache

from fastapi import Request

from packages.jp_core.config import JobAppConfig
from packages.jp_job.repository import JobPostRepository
from packages.jp_service.job_service import JobService

# --- Configuration ---

@lru_cache
def load_config() -> JobAppConfig:
    """
    Process-wide settings, read from the environment once.
    """
    return JobAppConfig.load()

def get_config(request: Request) -> JobAppConfig:
    return request.app.state.config

# --- Repositories (Persistence) ---

def get_job_post_repository(request: Request) -> JobPostRepository:
    """
    Registry owned by the running app (built in create_app, kept on app.state).
    Shared by every request for the lifetime of the process.
    """
    return request.app.state.job_repository

# --- Domain Services (Application Logic) ---

def get_job_service(request: Request) -> JobService:
    """
    Transient Job Service wrapping the app-scoped registry.
    """
    return JobService(repository=get_job_post_repository(request))
