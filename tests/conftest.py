"""
Shared fixtures: a throwaway SQLite database and helpers to create accounts.

DATABASE_URL must be set before job_portal is imported, since settings and
the engine are created at import time.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="job_portal_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from job_portal.main import app
from job_portal.db.database import engine
from job_portal.db.schema import clear_all

PASSWORD = "password123"


@pytest.fixture
def client():
    """TestClient with startup run (tables created) and all rows wiped afterwards."""
    with TestClient(app) as c:
        yield c
    clear_all(engine)


def register_employee(client, email="acme@example.com", company_name="Acme Corp", industry="Technology"):
    return client.post("/api/register", json={
        "email": email,
        "password": PASSWORD,
        "userType": "employee",
        "profileData": {"companyName": company_name, "contactPerson": "Jane Boss", "industry": industry},
    })


def register_student(client, email="sam@example.com", first_name="Sam", university="MIT"):
    return client.post("/api/register", json={
        "email": email,
        "password": PASSWORD,
        "userType": "student",
        "profileData": {"firstName": first_name, "lastName": "Student", "university": university},
    })


def login(client, email, password=PASSWORD):
    return client.post("/api/login", json={"email": email, "password": password})


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def headers_for(client, email):
    response = login(client, email)
    assert response.status_code == 200, response.text
    return auth_headers(response.json()["token"])


def create_job(client, headers, **overrides):
    job = {
        "title": "Junior Developer",
        "description": "Build internal tools",
        "jobType": "Part-time",
        "industry": "Technology",
        "location": "Remote",
        "salary": "$20/h",
    }
    job.update(overrides)
    response = client.post("/api/jobs", json=job, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["jobId"]


def user_id_for(client, headers):
    return client.get("/api/profile", headers=headers).json()["user_id"]


@pytest.fixture
def employee_headers(client):
    register_employee(client)
    return headers_for(client, "acme@example.com")


@pytest.fixture
def student_headers(client):
    register_student(client)
    return headers_for(client, "sam@example.com")
