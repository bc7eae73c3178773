"""
Dashboard Routes

GET /dashboard/stats - Role-specific counters for the dashboard cards
GET /options - Industry, job type and university choices for the forms
"""

from typing import Union

from fastapi import APIRouter, Depends

from job_portal.db.database import execute_raw_sql
from job_portal.core.auth import get_current_user
from job_portal.schemas.schemas import (
    StudentStatsResponse, EmployeeStatsResponse, OptionsResponse, UserRole,
    INDUSTRIES, JOB_TYPES, UNIVERSITIES
)

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=Union[StudentStatsResponse, EmployeeStatsResponse])
async def get_dashboard_stats(user: dict = Depends(get_current_user)):
    """Application counts for students; job and applicant counts for employers."""
    if user["role"] == UserRole.student.value:
        r = execute_raw_sql("""
            SELECT COUNT(*) AS total_applications,
                   COALESCE(SUM(CASE WHEN status = 'pending' THEN 1 ELSE 0 END), 0) AS pending,
                   COALESCE(SUM(CASE WHEN status = 'approved' THEN 1 ELSE 0 END), 0) AS approved,
                   COALESCE(SUM(CASE WHEN status = 'rejected' THEN 1 ELSE 0 END), 0) AS rejected
            FROM applications WHERE student_id = :id
        """, {"id": user["user_id"]})[0]
        return StudentStatsResponse(**r)

    r = execute_raw_sql("""
        SELECT COUNT(DISTINCT j.id) AS total_jobs,
               COUNT(a.id) AS total_applications,
               COALESCE(SUM(CASE WHEN a.status = 'pending' THEN 1 ELSE 0 END), 0) AS pending
        FROM jobs j LEFT JOIN applications a ON a.job_id = j.id
        WHERE j.employer_id = :id
    """, {"id": user["user_id"]})[0]
    return EmployeeStatsResponse(**r)


@router.get("/options", response_model=OptionsResponse)
async def get_options():
    """Choices offered by the registration and job posting forms."""
    return OptionsResponse(industries=INDUSTRIES, job_types=JOB_TYPES, universities=UNIVERSITIES)
