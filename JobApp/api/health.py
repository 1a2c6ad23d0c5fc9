from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from JobApp.api.dependencies import get_config, get_job_post_repository
from JobApp.api.schemas import HealthResponse
from packages.jp_core.config import JobAppConfig
from packages.jp_job.repository import JobPostRepository

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
def health_check(
    config: JobAppConfig = Depends(get_config),
    repository: JobPostRepository = Depends(get_job_post_repository)
):
    """
    Server Liveness Probe.
    Returns status, version, registry size and current timestamp.
    """
    return HealthResponse(
        status="ok",
        version=config.VERSION,
        job_count=repository.count(),
        timestamp=datetime.now(timezone.utc)
    )
