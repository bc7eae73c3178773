import pytest
from sqlalchemy.exc import IntegrityError

from job_portal.db.database import execute_raw_sql

from conftest import create_job, headers_for, register_employee, register_student, user_id_for


def _application_id(job_id):
    return execute_raw_sql("SELECT id FROM applications WHERE job_id = :id", {"id": job_id})[0]["id"]


def test_student_applies_once(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)

    first = client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    assert first.status_code == 201
    assert first.json()["message"] == "Application submitted successfully"

    second = client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    assert second.status_code == 400
    assert second.json()["detail"] == "Already applied for this job"

    rows = execute_raw_sql("SELECT status FROM applications WHERE job_id = :id", {"id": job_id})
    assert rows == [{"status": "pending"}]


def test_unique_constraint_blocks_duplicate_rows(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    student_id = user_id_for(client, student_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)

    with pytest.raises(IntegrityError):
        execute_raw_sql(
            "INSERT INTO applications (job_id, student_id) VALUES (:jid, :sid) RETURNING id",
            {"jid": job_id, "sid": student_id},
        )


def test_apply_to_missing_job_is_404(client, student_headers):
    response = client.post("/api/apply", json={"jobId": 12345}, headers=student_headers)
    assert response.status_code == 404


def test_employee_cannot_apply(client, employee_headers):
    job_id = create_job(client, employee_headers)
    response = client.post("/api/apply", json={"jobId": job_id}, headers=employee_headers)
    assert response.status_code == 403


def test_my_applications_joins_job_and_company(client, employee_headers, student_headers):
    older = create_job(client, employee_headers, title="Older", jobType="Internship")
    newer = create_job(client, employee_headers, title="Newer")
    client.post("/api/apply", json={"jobId": older}, headers=student_headers)
    client.post("/api/apply", json={"jobId": newer}, headers=student_headers)

    response = client.get("/api/my-applications", headers=student_headers)
    assert response.status_code == 200
    applications = response.json()
    assert [a["title"] for a in applications] == ["Newer", "Older"]
    assert applications[1]["job_type"] == "Internship"
    assert all(a["company_name"] == "Acme Corp" for a in applications)
    assert all(a["status"] == "pending" for a in applications)


def test_job_applications_lists_student_details(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    register_student(client, email="ana@example.com", first_name="Ana", university="Yale University")
    ana = headers_for(client, "ana@example.com")
    client.put("/api/profile", json={"qualifications": "BA", "experience": "Retail"}, headers=ana)

    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=ana)

    response = client.get(f"/api/job-applications/{job_id}", headers=employee_headers)
    assert response.status_code == 200
    applicants = response.json()
    assert [a["first_name"] for a in applicants] == ["Ana", "Sam"]
    assert applicants[0]["university"] == "Yale University"
    assert applicants[0]["qualifications"] == "BA"
    assert applicants[0]["experience"] == "Retail"


def test_job_applications_hidden_from_other_employers(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    register_employee(client, email="globex@example.com", company_name="Globex")
    globex = headers_for(client, "globex@example.com")

    assert client.get(f"/api/job-applications/{job_id}", headers=globex).status_code == 404
    assert client.get(f"/api/job-applications/{job_id}", headers=student_headers).status_code == 403


def test_owner_approves_and_rejects(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    application_id = _application_id(job_id)

    response = client.put(
        f"/api/applications/{application_id}/status", json={"status": "approved"}, headers=employee_headers
    )
    assert response.status_code == 200
    assert client.get("/api/my-applications", headers=student_headers).json()[0]["status"] == "approved"

    client.put(f"/api/applications/{application_id}/status", json={"status": "rejected"}, headers=employee_headers)
    assert client.get("/api/my-applications", headers=student_headers).json()[0]["status"] == "rejected"


def test_status_outside_allowed_set_is_rejected(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    application_id = _application_id(job_id)

    response = client.put(
        f"/api/applications/{application_id}/status", json={"status": "hired!!"}, headers=employee_headers
    )
    assert response.status_code == 400
    rows = execute_raw_sql("SELECT status FROM applications WHERE id = :id", {"id": application_id})
    assert rows == [{"status": "pending"}]


def test_other_employer_cannot_change_status(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    application_id = _application_id(job_id)
    register_employee(client, email="globex@example.com", company_name="Globex")
    globex = headers_for(client, "globex@example.com")

    response = client.put(
        f"/api/applications/{application_id}/status", json={"status": "approved"}, headers=globex
    )
    assert response.status_code == 404
    assert client.get("/api/my-applications", headers=student_headers).json()[0]["status"] == "pending"
