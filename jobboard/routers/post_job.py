import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import resolve_submitter_id
from jobboard.errors import InternalError, IntakeError, MalformedPayload
from jobboard.models.job import Job
from jobboard.schemas.job import ErrorResponse, JobPostResponse, JobResponse
from jobboard.services.intake_service import intake_service

logger = logging.getLogger("jobboard.intake")

router = APIRouter(tags=["intake"])


def job_to_response(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        title=job.title,
        skills=job.skills,
        qualification=job.qualification,
        vacancy=job.vacancy,
        company=job.company,
        location=job.location,
        posted_date=job.created_at,
        apply_link=job.apply_link,
    )


@router.options("/post-job")
async def post_job_preflight():
    return Response(status_code=200)


@router.post(
    "/post-job",
    response_model=JobPostResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def post_job(
    request: Request,
    db: Session = Depends(get_db),
    submitter_id: str = Depends(resolve_submitter_id),
):
    try:
        try:
            body = await request.json()
        except ValueError as exc:
            raise MalformedPayload("Request body must be valid JSON.") from exc
        job = intake_service.submit(db, body, submitter_id)
        return JobPostResponse(success=True, job=job_to_response(job))
    except IntakeError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error in post-job")
        raise InternalError() from exc
