"""
Application Routes

POST /apply - Apply to a job (students only, once per job)
GET /my-applications - Get my applications (students only)
GET /job-applications/{job_id} - Applicants for one of my jobs (employees only)
PUT /applications/{application_id}/status - Approve / reject (owning employee only)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from typing import List

from job_portal.db.database import get_db_session, execute_raw_sql
from job_portal.core.auth import get_current_student, get_current_employee
from job_portal.core.errors import ApplicationError, NotFoundError
from job_portal.schemas.schemas import (
    ApplicationCreate, ApplicationStatusUpdate, ApplicationStatus,
    StudentApplicationResponse, JobApplicantResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Applications"])


@router.post("/apply", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def apply_to_job(application: ApplicationCreate, student: dict = Depends(get_current_student)):
    """
    Apply to a job. Students only. Cannot apply twice to same job.

    The UNIQUE(job_id, student_id) constraint is the real guard; the
    pre-check just gives the common case a clean answer.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT id FROM jobs WHERE id = :jid"), {"jid": application.job_id})
            if not result.fetchone():
                raise NotFoundError("Job not found")

            result = db.execute(
                text("SELECT id FROM applications WHERE job_id = :jid AND student_id = :sid"),
                {"jid": application.job_id, "sid": student["user_id"]}
            )
            if result.fetchone():
                raise ApplicationError()

            db.execute(
                text("INSERT INTO applications (job_id, student_id, status) VALUES (:jid, :sid, :status)"),
                {"jid": application.job_id, "sid": student["user_id"], "status": ApplicationStatus.pending.value}
            )
    except (ApplicationError, IntegrityError):
        logger.warning("Student %s already applied to job %s", student["user_id"], application.job_id)
        raise ApplicationError()

    return MessageResponse(message="Application submitted successfully")


@router.get("/my-applications", response_model=List[StudentApplicationResponse])
async def get_my_applications(student: dict = Depends(get_current_student)):
    """Get all job applications for current student."""
    return execute_raw_sql("""
        SELECT a.id, a.job_id, a.student_id, a.status, a.applied_at,
               j.title, j.job_type, ep.company_name
        FROM applications a
        JOIN jobs j ON a.job_id = j.id
        JOIN employee_profiles ep ON j.employer_id = ep.user_id
        WHERE a.student_id = :sid
        ORDER BY a.applied_at DESC, a.id DESC
    """, {"sid": student["user_id"]})


@router.get("/job-applications/{job_id}", response_model=List[JobApplicantResponse])
async def get_job_applications(job_id: int, employee: dict = Depends(get_current_employee)):
    """Get applicants for one of the caller's jobs, newest first."""
    with get_db_session() as db:
        result = db.execute(
            text("SELECT id FROM jobs WHERE id = :jid AND employer_id = :eid"),
            {"jid": job_id, "eid": employee["user_id"]}
        )
        if not result.fetchone():
            raise NotFoundError("Job not found")

        return execute_raw_sql("""
            SELECT a.id, a.job_id, a.student_id, a.status, a.applied_at,
                   sp.first_name, sp.last_name, sp.university, sp.qualifications, sp.experience
            FROM applications a
            JOIN student_profiles sp ON a.student_id = sp.user_id
            WHERE a.job_id = :jid
            ORDER BY a.applied_at DESC, a.id DESC
        """, {"jid": job_id}, db=db)


@router.put("/applications/{application_id}/status", response_model=MessageResponse)
async def update_application_status(
    application_id: int,
    update: ApplicationStatusUpdate,
    employee: dict = Depends(get_current_employee)
):
    """Set an application's status. Only the employer who owns the job may do this."""
    with get_db_session() as db:
        # Verify ownership
        result = db.execute(
            text("""
                SELECT a.id FROM applications a
                JOIN jobs j ON a.job_id = j.id
                WHERE a.id = :aid AND j.employer_id = :eid
            """),
            {"aid": application_id, "eid": employee["user_id"]}
        )
        if not result.fetchone():
            raise NotFoundError("Application not found")

        db.execute(
            text("UPDATE applications SET status = :status WHERE id = :aid"),
            {"aid": application_id, "status": update.status.value}
        )

    logger.info("Application %s set to %s by employer %s", application_id, update.status.value, employee["user_id"])
    return MessageResponse(message="Application status updated")
