from sqlalchemy import Column, ForeignKey, Text
from jobboard.database import Base


class Submission(Base):
    __tablename__ = "job_post_submissions"

    id = Column(Text, primary_key=True)
    submitter_id = Column(Text, nullable=False)
    job_id = Column(Text, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(Text, nullable=False)
