from typing import List

from packages.jp_core.logging import get_logger
from packages.jp_job.errors import JobPostNotFoundError
from packages.jp_job.models import JobPost
from packages.jp_job.repository import JobPostRepository

logger = get_logger("jp_service.job_service")

class JobService:
    """
    Facade over the Job Post registry used by the API layer.
    Turns the registry's "no match" results into JobPostNotFoundError.
    """

    def __init__(self, repository: JobPostRepository):
        self.repository = repository

    def get_all_jobs(self) -> List[JobPost]:
        return self.repository.list_all()

    def get_job(self, post_id: int) -> JobPost:
        job = self.repository.get_by_id(post_id)
        if job is None:
            raise JobPostNotFoundError(post_id)
        return job

    def add_job(self, job: JobPost) -> None:
        self.repository.add(job)
        logger.info(f"Added job post {job.post_id} ({job.post_profile})")
        logger.debug(f"Registry now holds: {[j.post_id for j in self.repository.list_all()]}")

    def update_job(self, job: JobPost) -> JobPost:
        """
        Overwrite an existing job post and return its state after the update.
        """
        updated = self.repository.update(job)
        if updated is None:
            logger.warning(f"Update skipped, job post {job.post_id} not found")
            raise JobPostNotFoundError(job.post_id)
        logger.info(f"Updated job post {job.post_id}")
        return updated

    def delete_job(self, post_id: int) -> None:
        if not self.repository.delete_by_id(post_id):
            logger.warning(f"Delete skipped, job post {post_id} not found")
            raise JobPostNotFoundError(post_id)
        logger.info(f"Deleted job post {post_id}")
