from conftest import create_job, headers_for, register_student


def test_student_stats_count_by_status(client, employee_headers, student_headers):
    approved_job = create_job(client, employee_headers)
    pending_job = create_job(client, employee_headers)
    client.post("/api/apply", json={"jobId": approved_job}, headers=student_headers)
    client.post("/api/apply", json={"jobId": pending_job}, headers=student_headers)

    applications = client.get(f"/api/job-applications/{approved_job}", headers=employee_headers).json()
    client.put(
        f"/api/applications/{applications[0]['id']}/status", json={"status": "approved"}, headers=employee_headers
    )

    stats = client.get("/api/dashboard/stats", headers=student_headers).json()
    assert stats == {"total_applications": 2, "pending": 1, "approved": 1, "rejected": 0}


def test_employee_stats(client, employee_headers, student_headers):
    job_id = create_job(client, employee_headers)
    create_job(client, employee_headers)
    register_student(client, email="ana@example.com")
    ana = headers_for(client, "ana@example.com")
    client.post("/api/apply", json={"jobId": job_id}, headers=student_headers)
    client.post("/api/apply", json={"jobId": job_id}, headers=ana)

    stats = client.get("/api/dashboard/stats", headers=employee_headers).json()
    assert stats == {"total_jobs": 2, "total_applications": 2, "pending": 2}


def test_new_student_stats_are_zero(client, student_headers):
    stats = client.get("/api/dashboard/stats", headers=student_headers).json()
    assert stats == {"total_applications": 0, "pending": 0, "approved": 0, "rejected": 0}


def test_stats_require_token(client):
    assert client.get("/api/dashboard/stats").status_code == 401


def test_options_are_public(client):
    options = client.get("/api/options").json()
    assert options["jobTypes"] == ["Part-time", "Internship"]
    assert "Technology" in options["industries"]
    assert "Other" in options["universities"]


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy", "database": "connected"}
    assert "message" in client.get("/").json()
