from sqlalchemy import JSON, Column, Integer, Text
from jobboard.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    qualification = Column(Text, nullable=False)
    vacancy = Column(Integer, nullable=False, default=1)
    skills = Column(JSON, nullable=False)
    apply_link = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)
