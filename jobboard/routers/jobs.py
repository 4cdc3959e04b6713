from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.routers.post_job import job_to_response
from jobboard.schemas.job import JobListResponse
from jobboard.services.job_store import job_store
from jobboard.services.listing_service import available_skills, filter_jobs

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(
    q: str | None = None,
    skill: list[str] | None = Query(None),
    posted_within_days: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    jobs = job_store.list_jobs(db)
    if q or skill or posted_within_days is not None:
        jobs = filter_jobs(jobs, q=q, skills=skill, posted_within_days=posted_within_days)
    return JobListResponse(jobs=[job_to_response(j) for j in jobs], total=len(jobs))


@router.get("/skills", response_model=list[str])
async def list_skills(db: Session = Depends(get_db)):
    return available_skills(job_store.list_jobs(db))
