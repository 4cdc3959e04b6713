import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.models.submission import Submission
from jobboard.services.job_store import JobRecordStore, job_store
from jobboard.utils.timestamps import parse_timestamp, utc_now

logger = logging.getLogger("jobboard.rate_limit")


@dataclass
class RateLimitDecision:
    allowed: bool
    retry_after_seconds: int | None = None


class RateLimiter:
    """Per-submitter throttle backed by the durable submission log.

    Nothing is kept in process memory, so limits survive restarts and are
    shared by every worker pointed at the same database. The check and the
    later record are not one transaction: two simultaneous posts from the same
    submitter can both pass. That is accepted for a best-effort throttle.
    """

    def __init__(
        self,
        store: JobRecordStore | None = None,
        window_seconds: int | None = None,
        max_submissions: int | None = None,
    ):
        self.store = store or job_store
        self._window_seconds = window_seconds
        self._max_submissions = max_submissions

    @property
    def window(self) -> timedelta:
        return timedelta(seconds=self._window_seconds or settings.rate_limit_window_seconds)

    @property
    def max_submissions(self) -> int:
        return self._max_submissions or settings.rate_limit_max_submissions

    def check(self, db: Session, submitter_id: str, now: datetime | None = None) -> RateLimitDecision:
        now = now or utc_now()
        recent = self.store.recent_submissions(db, submitter_id, since=now - self.window)
        if len(recent) < self.max_submissions:
            return RateLimitDecision(allowed=True)

        latest = parse_timestamp(recent[0].created_at)
        remaining = (latest + self.window - now).total_seconds()
        retry_after = max(1, math.ceil(remaining))
        logger.info("Rate limit hit for %s (%d in window), retry in %ds", submitter_id, len(recent), retry_after)
        return RateLimitDecision(allowed=False, retry_after_seconds=retry_after)

    def record(self, db: Session, submitter_id: str, job_id: str, now: datetime | None = None) -> Submission | None:
        return self.store.insert_submission(db, submitter_id, job_id, now)


rate_limiter = RateLimiter()
