import math
from datetime import datetime

from jobboard.models.job import Job
from jobboard.utils.timestamps import parse_timestamp, utc_now


def matches_query(job: Job, query: str) -> bool:
    needle = query.lower()
    return (
        needle in job.title.lower()
        or needle in job.company.lower()
        or any(needle in skill.lower() for skill in job.skills)
    )


def matches_skills(job: Job, skills: list[str]) -> bool:
    return any(skill in job.skills for skill in skills)


def posted_within(job: Job, days: int, now: datetime) -> bool:
    elapsed = abs((now - parse_timestamp(job.created_at)).total_seconds())
    return math.ceil(elapsed / 86400) <= days


def filter_jobs(
    jobs: list[Job],
    q: str | None = None,
    skills: list[str] | None = None,
    posted_within_days: int | None = None,
    now: datetime | None = None,
) -> list[Job]:
    now = now or utc_now()
    results = []
    for job in jobs:
        if q and not matches_query(job, q):
            continue
        if skills and not matches_skills(job, skills):
            continue
        if posted_within_days is not None and not posted_within(job, posted_within_days, now):
            continue
        results.append(job)
    return results


def available_skills(jobs: list[Job]) -> list[str]:
    return sorted({skill for job in jobs for skill in job.skills})
