import logging
import uuid
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.errors import PersistenceFailed
from jobboard.models.job import Job
from jobboard.models.submission import Submission
from jobboard.schemas.job import JobFields
from jobboard.utils.timestamps import format_timestamp, utc_now

logger = logging.getLogger("jobboard.store")


class JobRecordStore:
    def insert_job(self, db: Session, fields: JobFields, now: datetime | None = None) -> Job:
        job = Job(
            id=str(uuid.uuid4()),
            title=fields.title,
            company=fields.company,
            location=fields.location,
            qualification=fields.qualification,
            vacancy=fields.vacancy,
            skills=list(fields.skills),
            apply_link=fields.apply_link,
            created_at=format_timestamp(now or utc_now()),
        )
        try:
            db.add(job)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Job insertion failed for %r", fields.title)
            raise PersistenceFailed() from exc
        db.refresh(job)
        return job

    def insert_submission(
        self, db: Session, submitter_id: str, job_id: str, now: datetime | None = None
    ) -> Submission | None:
        # Runs in its own transaction after the job commit; a failure here
        # never affects the stored posting.
        submission = Submission(
            id=str(uuid.uuid4()),
            submitter_id=submitter_id,
            job_id=job_id,
            created_at=format_timestamp(now or utc_now()),
        )
        try:
            db.add(submission)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Could not record submission of job %s by %s", job_id, submitter_id)
            return None
        return submission

    def recent_submissions(self, db: Session, submitter_id: str, since: datetime) -> list[Submission]:
        # Strictly newer than the window start: a record exactly one window old has expired.
        return (
            db.query(Submission)
            .filter(Submission.submitter_id == submitter_id)
            .filter(Submission.created_at > format_timestamp(since))
            .order_by(Submission.created_at.desc())
            .all()
        )

    def list_jobs(self, db: Session) -> list[Job]:
        return db.query(Job).order_by(Job.created_at.desc(), Job.id.desc()).all()


job_store = JobRecordStore()
