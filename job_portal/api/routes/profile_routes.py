"""
Profile Routes

GET /profile - Get own merged profile (user + role profile)
PUT /profile - Update qualifications/experience (students only)
GET /employee-profile/{user_id} - Public employer profile
GET /student-profile/{user_id} - Public student profile
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text

from job_portal.db.database import get_db_session, execute_raw_sql
from job_portal.core.auth import get_current_user, get_current_student
from job_portal.core.errors import NotFoundError
from job_portal.schemas.schemas import (
    ProfileResponse, ProfileUpdate, PublicEmployeeProfile, PublicStudentProfile,
    MessageResponse, UserRole
)

router = APIRouter(tags=["Profiles"])


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(user: dict = Depends(get_current_user)):
    """Get the caller's account joined with the profile for their role."""
    if user["role"] == UserRole.employee.value:
        sql = """
            SELECT u.id AS user_id, u.email, u.role AS user_type, u.created_at,
                   ep.company_name, ep.contact_person, ep.industry
            FROM users u JOIN employee_profiles ep ON u.id = ep.user_id
            WHERE u.id = :id
        """
    else:
        sql = """
            SELECT u.id AS user_id, u.email, u.role AS user_type, u.created_at,
                   sp.first_name, sp.last_name, sp.university, sp.qualifications, sp.experience
            FROM users u JOIN student_profiles sp ON u.id = sp.user_id
            WHERE u.id = :id
        """

    results = execute_raw_sql(sql, {"id": user["user_id"]})
    if not results:
        raise NotFoundError("Profile not found")

    return results[0]


@router.put("/profile", response_model=MessageResponse)
async def update_profile(data: ProfileUpdate, student: dict = Depends(get_current_student)):
    """Overwrite qualifications and experience. Content is stored as given."""
    with get_db_session() as db:
        result = db.execute(
            text("""
                UPDATE student_profiles SET qualifications = :qualifications, experience = :experience
                WHERE user_id = :id
            """),
            {"id": student["user_id"], "qualifications": data.qualifications, "experience": data.experience}
        )
        if result.rowcount == 0:
            raise NotFoundError("Profile not found")

    return MessageResponse(message="Profile updated successfully")


@router.get("/employee-profile/{user_id}", response_model=PublicEmployeeProfile)
async def get_employee_profile(user_id: int):
    """Public employer card. Only company details are exposed."""
    results = execute_raw_sql(
        "SELECT company_name, contact_person, industry FROM employee_profiles WHERE user_id = :id",
        {"id": user_id}
    )
    if not results:
        raise NotFoundError("Employee profile not found")
    return results[0]


@router.get("/student-profile/{user_id}", response_model=PublicStudentProfile)
async def get_student_profile(user_id: int):
    """Public student card. Email and account details are never exposed."""
    results = execute_raw_sql(
        """
        SELECT first_name, last_name, university, qualifications, experience
        FROM student_profiles WHERE user_id = :id
        """,
        {"id": user_id}
    )
    if not results:
        raise NotFoundError("Student profile not found")
    return results[0]
