from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobPostRequest(BaseModel):
    """Raw intake payload. Only types are checked here; emptiness is checked later."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    skills: list[str] | None = None
    qualification: str | None = None
    vacancy: Any = None
    company: str | None = None
    location: str | None = None
    apply_link: str | None = Field(None, alias="applyLink")
    math_answer: Any = Field(None, alias="mathAnswer")
    math_a: int = Field(alias="mathA")
    math_b: int = Field(alias="mathB")


class JobFields(BaseModel):
    title: str
    company: str
    location: str | None
    qualification: str
    vacancy: int = Field(ge=1)
    skills: list[str] = Field(min_length=1)
    apply_link: str


class JobResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    skills: list[str]
    qualification: str
    vacancy: int
    company: str
    location: str | None
    posted_date: str = Field(alias="postedDate")
    apply_link: str = Field(alias="applyLink")


class JobPostResponse(BaseModel):
    success: bool = True
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total: int


class ErrorResponse(BaseModel):
    error: str
