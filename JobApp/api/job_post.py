from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from JobApp.api.schemas import JobPostSchema
from JobApp.api.dependencies import get_job_service
from packages.jp_job.errors import JobPostNotFoundError
from packages.jp_service.job_service import JobService

router = APIRouter(tags=["JobPost"])

@router.get("/jobPosts", response_model=List[JobPostSchema])
def get_all_jobs(
    service: JobService = Depends(get_job_service)
):
    """
    List every job post in insertion order.
    """
    return [JobPostSchema.from_domain(j) for j in service.get_all_jobs()]

@router.get("/JobPost/{post_id}", response_model=JobPostSchema)
def get_job_post(
    post_id: int,
    service: JobService = Depends(get_job_service)
):
    try:
        return JobPostSchema.from_domain(service.get_job(post_id))
    except JobPostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.post("/JobPost", status_code=status.HTTP_200_OK, response_class=Response)
def add_job(
    request: JobPostSchema,
    service: JobService = Depends(get_job_service)
):
    """
    Append a job post. Existing post_ids are not checked.
    """
    service.add_job(request.to_domain())
    return Response(status_code=status.HTTP_200_OK)

@router.put("/JobPost", response_model=JobPostSchema)
def update_job(
    request: JobPostSchema,
    service: JobService = Depends(get_job_service)
):
    """
    Overwrite the job post with the same postId and return it.
    """
    try:
        return JobPostSchema.from_domain(service.update_job(request.to_domain()))
    except JobPostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.delete("/jobPost/{post_id}", response_class=PlainTextResponse)
def delete_job(
    post_id: int,
    service: JobService = Depends(get_job_service)
):
    try:
        service.delete_job(post_id)
    except JobPostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return "Done"
