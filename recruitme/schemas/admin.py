"""
Pydantic schemas for admin reports.
"""
from typing import List
from pydantic import BaseModel, Field

from recruitme.db.models.job import JobStatus


class CompanyStats(BaseModel):
    id: str
    name: str
    job_count: int = 0
    application_count: int = 0
    hired_count: int = 0


class CompanyListResponse(BaseModel):
    companies: List[CompanyStats]
    total: int


class JobStats(BaseModel):
    id: str
    company_name: str
    title: str
    status: JobStatus
    applicant_count: int = 0
    hired_count: int = 0


class JobStatsListResponse(BaseModel):
    jobs: List[JobStats]
    total: int


class CompanyJobStats(BaseModel):
    id: str
    title: str
    status: JobStatus
    applicant_count: int = 0
    hired_count: int = 0


class CompanyJobStatsListResponse(BaseModel):
    jobs: List[CompanyJobStats]
    total: int


class ApplicantStats(BaseModel):
    id: str
    name: str
    application_count: int = 0
    skills: List[str] = Field(default_factory=list)


class ApplicantStatsListResponse(BaseModel):
    applicants: List[ApplicantStats]
    total: int
