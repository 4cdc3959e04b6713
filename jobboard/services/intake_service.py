"""Validate, throttle and persist one anonymous job posting.

Steps run in a fixed order and each failure is terminal for the request:
payload shape, captcha, rate limit, required fields, job insert. The audit
record is written last and its failure is only logged.
"""
import logging
import math
from datetime import datetime
from typing import Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobboard.errors import CaptchaFailed, MalformedPayload, RateLimited, ValidationFailed
from jobboard.models.job import Job
from jobboard.schemas.job import JobFields, JobPostRequest
from jobboard.services import captcha_service
from jobboard.services.job_store import JobRecordStore, job_store
from jobboard.services.rate_limiter import RateLimiter, rate_limiter
from jobboard.utils.timestamps import utc_now

logger = logging.getLogger("jobboard.intake")

# Largest value an SQLite INTEGER column can hold.
MAX_VACANCY = 2**63 - 1


def parse_payload(body: Any) -> JobPostRequest:
    if not isinstance(body, dict):
        raise MalformedPayload("Request body must be a JSON object.")
    try:
        return JobPostRequest.model_validate(body)
    except ValidationError as exc:
        bad = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        logger.info("Malformed job payload: %s", bad)
        raise MalformedPayload(f"Malformed job submission payload: {', '.join(bad)}") from exc


def normalize_skills(skills: list[str] | None) -> list[str]:
    seen: list[str] = []
    for skill in skills or []:
        skill = skill.strip()
        if skill and skill not in seen:
            seen.append(skill)
    return seen


def normalize_vacancy(value: Any) -> int | None:
    """Absent or non-numeric vacancies default to 1; numbers outside 1..MAX_VACANCY are invalid."""
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value if 1 <= value <= MAX_VACANCY else None
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 1
    if not math.isfinite(number):
        return 1
    if not number.is_integer() or number < 1:
        return None
    number = int(number)
    return number if number <= MAX_VACANCY else None


def validate_fields(req: JobPostRequest) -> JobFields:
    title = (req.title or "").strip()
    company = (req.company or "").strip()
    qualification = (req.qualification or "").strip()
    apply_link = (req.apply_link or "").strip()
    location = (req.location or "").strip() or None
    skills = normalize_skills(req.skills)
    vacancy = normalize_vacancy(req.vacancy)

    missing = []
    if not title:
        missing.append("title")
    if not company:
        missing.append("company")
    if not qualification:
        missing.append("qualification")
    if not apply_link:
        missing.append("applyLink")
    if not skills:
        missing.append("skills")
    if vacancy is None:
        missing.append("vacancy")
    if missing:
        raise ValidationFailed(missing)

    return JobFields(
        title=title,
        company=company,
        location=location,
        qualification=qualification,
        vacancy=vacancy,
        skills=skills,
        apply_link=apply_link,
    )


class IntakeService:
    def __init__(self, store: JobRecordStore | None = None, limiter: RateLimiter | None = None):
        self.store = store or job_store
        self.limiter = limiter or rate_limiter

    def submit(self, db: Session, body: Any, submitter_id: str, now: datetime | None = None) -> Job:
        now = now or utc_now()
        req = parse_payload(body)

        if not captcha_service.verify(req.math_a, req.math_b, req.math_answer):
            logger.info("Captcha failed for %s", submitter_id)
            raise CaptchaFailed()

        decision = self.limiter.check(db, submitter_id, now)
        if not decision.allowed:
            raise RateLimited(decision.retry_after_seconds)

        fields = validate_fields(req)
        job = self.store.insert_job(db, fields, now)
        logger.info("Job %s posted by %s", job.id, submitter_id)

        if self.limiter.record(db, submitter_id, job.id, now) is None:
            logger.error("Job %s stored without an audit record; %s is not throttled", job.id, submitter_id)
        return job


intake_service = IntakeService()
