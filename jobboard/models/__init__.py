from jobboard.models.job import Job
from jobboard.models.submission import Submission

__all__ = ["Job", "Submission"]
