import logging
import unittest

from packages.jp_job.errors import JobPostNotFoundError
from packages.jp_job.models import JobPost, default_job_posts
from packages.jp_job.repository import MemoryJobPostRepository
from packages.jp_service.job_service import JobService


class TestJobService(unittest.TestCase):
    def setUp(self):
        self.service = JobService(MemoryJobPostRepository(initial=default_job_posts()))
        self.go_job = JobPost(
            post_id=3,
            post_profile="Go developer",
            post_desc="2yr",
            req_experience=2,
            post_tech_stack=["Go"]
        )

    def test_get_all_jobs(self):
        self.assertEqual([j.post_id for j in self.service.get_all_jobs()], [1, 2])

    def test_get_job_found(self):
        self.assertEqual(self.service.get_job(2).post_profile, "c developer")

    def test_get_job_missing_raises(self):
        with self.assertRaises(JobPostNotFoundError) as ctx:
            self.service.get_job(99)
        self.assertEqual(ctx.exception.code, "JOB_NOT_FOUND")
        self.assertEqual(ctx.exception.details, {"post_id": 99})
        self.assertEqual(ctx.exception.post_id, 99)

    def test_add_job_logs(self):
        with self.assertLogs("jp_service.job_service", level=logging.INFO) as logs:
            self.service.add_job(self.go_job)
        self.assertTrue(any("Added job post 3" in line for line in logs.output))
        self.assertEqual(self.service.get_job(3), self.go_job)

    def test_update_job_returns_updated(self):
        changed = self.go_job.model_copy(update={"post_id": 1})
        updated = self.service.update_job(changed)
        self.assertEqual(updated.post_id, 1)
        self.assertEqual(updated.post_profile, "Go developer")

    def test_update_missing_raises_and_leaves_state(self):
        with self.assertRaises(JobPostNotFoundError):
            self.service.update_job(self.go_job)
        self.assertEqual(len(self.service.get_all_jobs()), 2)

    def test_delete_job(self):
        self.service.delete_job(1)
        with self.assertRaises(JobPostNotFoundError):
            self.service.get_job(1)

    def test_delete_missing_raises(self):
        with self.assertLogs("jp_service.job_service", level=logging.WARNING):
            with self.assertRaises(JobPostNotFoundError):
                self.service.delete_job(99)
        self.assertEqual(len(self.service.get_all_jobs()), 2)


if __name__ == "__main__":
    unittest.main()
