"""
Job Routes

POST /jobs - Create job posting (employee only)
GET /jobs - List all jobs with filters
GET /jobs/{job_id} - Get job details
GET /my-jobs - Get caller's own postings (employee only)
DELETE /jobs/{job_id} - Delete job and its applications (owning employee only)
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import text
from typing import List, Optional

from job_portal.db.database import get_db_session, execute_raw_sql
from job_portal.core.auth import get_current_employee
from job_portal.core.errors import NotFoundError
from job_portal.schemas.schemas import (
    JobCreate, JobCreatedResponse, JobResponse, EmployerJobResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Jobs"])

JOB_COLUMNS = """
    j.id, j.employer_id, j.title, j.description, j.job_type, j.industry, j.location,
    j.requirements, j.salary, j.external_application_link, j.created_at
"""


def _like_pattern(term: str) -> str:
    """Case-insensitive substring pattern with LIKE wildcards escaped."""
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@router.post("/jobs", response_model=JobCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_job(job: JobCreate, employee: dict = Depends(get_current_employee)):
    """Create a new job posting. Fields are stored as submitted."""
    with get_db_session() as db:
        result = db.execute(
            text("""
                INSERT INTO jobs (employer_id, title, description, job_type, industry, location,
                    requirements, salary, external_application_link)
                VALUES (:employer_id, :title, :description, :job_type, :industry, :location,
                    :requirements, :salary, :external_application_link)
                RETURNING id
            """),
            {"employer_id": employee["user_id"], **job.model_dump()}
        )
        job_id = result.scalar_one()

    logger.info("Employer %s created job %s", employee["user_id"], job_id)
    return JobCreatedResponse(message="Job created successfully", job_id=job_id)


@router.get("/jobs", response_model=List[JobResponse])
async def list_jobs(
    search: Optional[str] = Query(None, description="Substring of title, description or company name"),
    industry: Optional[str] = Query(None),
    job_type: Optional[str] = Query(None, alias="jobType")
):
    """List all job postings, newest first. Filters are combined with AND."""
    sql = f"""
        SELECT {JOB_COLUMNS}, ep.company_name
        FROM jobs j
        JOIN employee_profiles ep ON j.employer_id = ep.user_id
        WHERE 1 = 1
    """
    params = {}

    if search:
        sql += """
            AND (LOWER(j.title) LIKE :search ESCAPE '\\'
                 OR LOWER(j.description) LIKE :search ESCAPE '\\'
                 OR LOWER(ep.company_name) LIKE :search ESCAPE '\\')
        """
        params["search"] = _like_pattern(search)
    if industry:
        sql += " AND j.industry = :industry"
        params["industry"] = industry
    if job_type:
        sql += " AND j.job_type = :job_type"
        params["job_type"] = job_type

    sql += " ORDER BY j.created_at DESC, j.id DESC"
    return execute_raw_sql(sql, params)


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: int):
    """Get details of a specific job."""
    results = execute_raw_sql(f"""
        SELECT {JOB_COLUMNS}, ep.company_name
        FROM jobs j LEFT JOIN employee_profiles ep ON j.employer_id = ep.user_id
        WHERE j.id = :jid
    """, {"jid": job_id})

    if not results:
        raise NotFoundError("Job not found")
    return results[0]


@router.get("/my-jobs", response_model=List[EmployerJobResponse])
async def get_my_jobs(employee: dict = Depends(get_current_employee)):
    """Get all jobs posted by the caller with their application counts."""
    return execute_raw_sql(f"""
        SELECT {JOB_COLUMNS}, ep.company_name, COUNT(a.id) AS application_count
        FROM jobs j
        LEFT JOIN employee_profiles ep ON j.employer_id = ep.user_id
        LEFT JOIN applications a ON a.job_id = j.id
        WHERE j.employer_id = :eid
        GROUP BY {JOB_COLUMNS}, ep.company_name
        ORDER BY j.created_at DESC, j.id DESC
    """, {"eid": employee["user_id"]})


@router.delete("/jobs/{job_id}", response_model=MessageResponse)
async def delete_job(job_id: int, employee: dict = Depends(get_current_employee)):
    """
    Delete a job posting and its applications.

    Both deletes run in one transaction scoped to the caller's jobs; a job
    owned by someone else reports 404 and nothing is removed.
    """
    with get_db_session() as db:
        result = db.execute(
            text("SELECT id FROM jobs WHERE id = :jid AND employer_id = :eid"),
            {"jid": job_id, "eid": employee["user_id"]}
        )
        if not result.fetchone():
            raise NotFoundError("Job not found or you do not have permission to delete it")

        db.execute(text("DELETE FROM applications WHERE job_id = :jid"), {"jid": job_id})
        db.execute(
            text("DELETE FROM jobs WHERE id = :jid AND employer_id = :eid"),
            {"jid": job_id, "eid": employee["user_id"]}
        )

    logger.info("Employer %s deleted job %s", employee["user_id"], job_id)
    return MessageResponse(message="Job and associated applications deleted successfully")
