from datetime import datetime
from typing import List
from pydantic import ConfigDict, Field

from packages.jp_core.dto import BaseDTO
from packages.jp_job.models import JobPost

# --- Request / Response Schemas ---
# Wire names are camelCase (postId, postProfile, ...).

class JobPostSchema(BaseDTO):
    # Free text is stored exactly as sent.
    model_config = ConfigDict(str_strip_whitespace=False)

    post_id: int = Field(..., alias="postId")
    post_profile: str = Field(..., alias="postProfile")
    post_desc: str = Field(..., alias="postDesc")
    req_experience: int = Field(..., alias="reqExperience")
    post_tech_stack: List[str] = Field(default_factory=list, alias="postTechStack")

    def to_domain(self) -> JobPost:
        return JobPost(
            post_id=self.post_id,
            post_profile=self.post_profile,
            post_desc=self.post_desc,
            req_experience=self.req_experience,
            post_tech_stack=self.post_tech_stack
        )

    @classmethod
    def from_domain(cls, job: JobPost) -> "JobPostSchema":
        return cls(
            post_id=job.post_id,
            post_profile=job.post_profile,
            post_desc=job.post_desc,
            req_experience=job.req_experience,
            post_tech_stack=list(job.post_tech_stack)
        )

class HealthResponse(BaseDTO):
    status: str
    version: str
    job_count: int = Field(..., alias="jobCount")
    timestamp: datetime
