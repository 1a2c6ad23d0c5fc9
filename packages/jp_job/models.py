from typing import List
from pydantic import BaseModel, Field

class JobPost(BaseModel):
    """
    Job Posting record.
    post_id is supplied by the caller and never generated; uniqueness is not enforced.
    """
    post_id: int = Field(..., description="Caller-supplied Job Post ID")
    post_profile: str = Field(..., description="Job Profile (e.g. 'Java developer')")
    post_desc: str = Field(..., description="Job Description")
    req_experience: int = Field(..., description="Required Experience (years)")
    post_tech_stack: List[str] = Field(default_factory=list, description="Technology Tags")

    def apply_update(self, other: "JobPost") -> None:
        """
        Overwrite every field except post_id with the values from other.
        """
        self.post_profile = other.post_profile
        self.post_desc = other.post_desc
        self.req_experience = other.req_experience
        self.post_tech_stack = list(other.post_tech_stack)


def default_job_posts() -> List[JobPost]:
    """
    Seed entries loaded into a fresh registry at startup.
    """
    return [
        JobPost(
            post_id=1,
            post_profile="Java developer",
            post_desc="Must have 2exp",
            req_experience=2,
            post_tech_stack=["Core Java", "J2EE", "Spring Boot", "Hibernate"]
        ),
        JobPost(
            post_id=2,
            post_profile="c developer",
            post_desc="Must have 2exp",
            req_experience=2,
            post_tech_stack=["c", "assembly"]
        ),
    ]
