from .models import JobPost, default_job_posts
from .errors import JobPostError, JobPostNotFoundError
from .repository import JobPostRepository, MemoryJobPostRepository

__all__ = [
    "JobPost",
    "default_job_posts",
    "JobPostError",
    "JobPostNotFoundError",
    "JobPostRepository",
    "MemoryJobPostRepository",
]
