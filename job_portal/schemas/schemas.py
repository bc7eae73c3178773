"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request bodies use the camelCase keys the web client sends (userType,
profileData, jobType, jobId); response bodies mirror the database columns.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List, Dict, Any, Union
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    employee = "employee"
    student = "student"


class ApplicationStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# Options offered by the registration and job forms
INDUSTRIES = [
    "Technology", "Healthcare", "Finance", "Education", "Marketing",
    "Retail", "Manufacturing", "Consulting", "Non-profit", "Government",
]

JOB_TYPES = ["Part-time", "Internship"]

UNIVERSITIES = [
    "Harvard University", "Stanford University", "MIT", "University of California",
    "Yale University", "Princeton University", "Columbia University", "University of Chicago",
    "University of Pennsylvania", "Duke University", "Other",
]


class CamelModel(BaseModel):
    """Accepts either the alias or the field name on input."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class EmployeeProfileData(CamelModel):
    company_name: str = Field(..., alias="companyName", min_length=1, max_length=200)
    contact_person: str = Field(..., alias="contactPerson", min_length=1, max_length=200)
    industry: str = Field(..., min_length=1, max_length=100)


class StudentProfileData(CamelModel):
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=100)
    university: str = Field(..., min_length=1, max_length=200)


PROFILE_DATA_MODELS = {
    UserRole.employee: EmployeeProfileData,
    UserRole.student: StudentProfileData,
}


class RegisterRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr
    password: str = Field(..., min_length=8)
    user_type: UserRole = Field(..., alias="userType")
    # Validated against the role-specific model by the register route
    profile_data: Dict[str, Any] = Field(default_factory=dict, alias="profileData")

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class TokenResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    user_type: str = Field(..., alias="userType")


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class ProfileUpdate(BaseModel):
    qualifications: Optional[str] = None
    experience: Optional[str] = None


class EmployeeProfileResponse(BaseModel):
    user_id: int
    email: str
    user_type: str = UserRole.employee.value
    company_name: str
    contact_person: str
    industry: str
    created_at: Optional[datetime] = None


class StudentProfileResponse(BaseModel):
    user_id: int
    email: str
    user_type: str = UserRole.student.value
    first_name: str
    last_name: str
    university: str
    qualifications: Optional[str] = None
    experience: Optional[str] = None
    created_at: Optional[datetime] = None


class PublicEmployeeProfile(BaseModel):
    company_name: str
    contact_person: str
    industry: str


class PublicStudentProfile(BaseModel):
    first_name: str
    last_name: str
    university: str
    qualifications: Optional[str] = None
    experience: Optional[str] = None


ProfileResponse = Union[EmployeeProfileResponse, StudentProfileResponse]


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    job_type: str = Field(..., alias="jobType", min_length=1, max_length=50)
    industry: str = Field(..., min_length=1, max_length=100)
    location: Optional[str] = None
    requirements: Optional[str] = None
    salary: Optional[str] = None
    external_application_link: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "externalApplicationLink", "googleFormLink", "external_application_link"
        ),
    )


class JobCreatedResponse(CamelModel):
    message: str
    job_id: int = Field(..., alias="jobId")


class JobResponse(BaseModel):
    id: int
    employer_id: int
    company_name: Optional[str] = None
    title: str
    description: str
    job_type: str
    industry: str
    location: Optional[str] = None
    requirements: Optional[str] = None
    salary: Optional[str] = None
    external_application_link: Optional[str] = None
    created_at: Optional[datetime] = None


class EmployerJobResponse(JobResponse):
    application_count: int = 0


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(CamelModel):
    job_id: int = Field(..., alias="jobId")


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class StudentApplicationResponse(BaseModel):
    id: int
    job_id: int
    student_id: int
    status: str
    applied_at: Optional[datetime] = None
    title: str
    job_type: str
    company_name: str


class JobApplicantResponse(BaseModel):
    id: int
    job_id: int
    student_id: int
    status: str
    applied_at: Optional[datetime] = None
    first_name: str
    last_name: str
    university: str
    qualifications: Optional[str] = None
    experience: Optional[str] = None


# ============================================================
# DASHBOARD SCHEMAS
# ============================================================

class StudentStatsResponse(BaseModel):
    total_applications: int
    pending: int
    approved: int
    rejected: int


class EmployeeStatsResponse(BaseModel):
    total_jobs: int
    total_applications: int
    pending: int


class OptionsResponse(CamelModel):
    industries: List[str]
    job_types: List[str] = Field(..., alias="jobTypes")
    universities: List[str]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
