#!/usr/bin/env python3
"""
Job Portal Database Seeder

Creates demo accounts and listings:
- Two employers (Technology, Finance) with a few jobs each
- Two students, one of whom has applied to two jobs

All demo accounts use the password "password123".
Usage: python scripts/seed_db.py [--reset]
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy import text

from job_portal.core.auth import hash_password
from job_portal.db.database import engine, get_db_session
from job_portal.db.schema import init_schema, clear_all

DEMO_PASSWORD = "password123"

EMPLOYERS = [
    {
        "email": "hr@brightbyte.example.com",
        "company_name": "BrightByte",
        "contact_person": "Priya Raman",
        "industry": "Technology",
        "jobs": [
            ("Frontend Intern", "Help build our React dashboard.", "Internship", "Remote", "$18/h"),
            ("QA Assistant", "Write and run manual test plans.", "Part-time", "Austin, TX", "$20/h"),
        ],
    },
    {
        "email": "jobs@northbank.example.com",
        "company_name": "Northbank",
        "contact_person": "Tom Alvarez",
        "industry": "Finance",
        "jobs": [
            ("Analyst Intern", "Support the credit risk team.", "Internship", "Chicago, IL", "$22/h"),
        ],
    },
]

STUDENTS = [
    {"email": "mia@example.com", "first_name": "Mia", "last_name": "Chen", "university": "MIT",
     "qualifications": "BSc Computer Science (in progress)", "experience": "Hackathon winner 2025"},
    {"email": "leo@example.com", "first_name": "Leo", "last_name": "Novak", "university": "Duke University",
     "qualifications": None, "experience": None},
]


def _insert_user(db, email: str, role: str) -> int:
    result = db.execute(
        text("INSERT INTO users (email, password_hash, role) VALUES (:email, :hash, :role) RETURNING id"),
        {"email": email, "hash": hash_password(DEMO_PASSWORD), "role": role}
    )
    return result.scalar_one()


def seed_database(reset: bool = False):
    """Seed the database with demo data."""
    init_schema(engine)
    if reset:
        clear_all(engine)

    with get_db_session() as db:
        # Check if already seeded
        existing = db.execute(
            text("SELECT id FROM users WHERE email = :email"), {"email": EMPLOYERS[0]["email"]}
        ).fetchone()
        if existing:
            print("Database already seeded. Skipping... (use --reset to start over)")
            return

        print("Seeding database...")

        job_ids = []
        for employer in EMPLOYERS:
            user_id = _insert_user(db, employer["email"], "employee")
            db.execute(
                text("""
                    INSERT INTO employee_profiles (user_id, company_name, contact_person, industry)
                    VALUES (:uid, :company_name, :contact_person, :industry)
                """),
                {"uid": user_id, "company_name": employer["company_name"],
                 "contact_person": employer["contact_person"], "industry": employer["industry"]}
            )
            for title, description, job_type, location, salary in employer["jobs"]:
                result = db.execute(
                    text("""
                        INSERT INTO jobs (employer_id, title, description, job_type, industry, location, salary)
                        VALUES (:uid, :title, :description, :job_type, :industry, :location, :salary)
                        RETURNING id
                    """),
                    {"uid": user_id, "title": title, "description": description, "job_type": job_type,
                     "industry": employer["industry"], "location": location, "salary": salary}
                )
                job_ids.append(result.scalar_one())

        student_ids = []
        for student in STUDENTS:
            user_id = _insert_user(db, student["email"], "student")
            db.execute(
                text("""
                    INSERT INTO student_profiles (user_id, first_name, last_name, university, qualifications, experience)
                    VALUES (:uid, :first_name, :last_name, :university, :qualifications, :experience)
                """),
                {"uid": user_id, **{k: v for k, v in student.items() if k != "email"}}
            )
            student_ids.append(user_id)

        # Mia applied to the first two jobs; the first one is already approved
        db.execute(
            text("INSERT INTO applications (job_id, student_id, status) VALUES (:jid, :sid, 'approved')"),
            {"jid": job_ids[0], "sid": student_ids[0]}
        )
        db.execute(
            text("INSERT INTO applications (job_id, student_id) VALUES (:jid, :sid)"),
            {"jid": job_ids[1], "sid": student_ids[0]}
        )

    print(f"Seeded {len(EMPLOYERS)} employers, {len(job_ids)} jobs, {len(STUDENTS)} students.")
    print(f"Demo password for every account: {DEMO_PASSWORD}")


if __name__ == "__main__":
    seed_database(reset="--reset" in sys.argv)
