from packages.jp_core.errors import JobAppBaseError

class JobPostError(JobAppBaseError):
    """Base exception for the Job Post package"""
    pass

class JobPostNotFoundError(JobPostError):
    """Raised when no Job Post matches the requested post_id"""
    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__(
            code="JOB_NOT_FOUND",
            message=f"Job post {post_id} not found",
            details={"post_id": post_id}
        )
