#!/usr/bin/env python3
"""
Database Seeding Script for the Employee Reports API
Creates a demo organization owner, an employee with monthly reports,
and an access token that can be used against GET /api/reports
"""

import sys
from datetime import datetime, timedelta
from typing import List

from app.core.config import settings
from app.core.database import SessionLocal, engine, Base
from app.core.security import create_access_token
from app.models.user import User, UserSession, Organization
from app.models.employee import Employee
from app.models.report import Report

# ANSI color codes for pretty output
class Colors:
    HEADER = '\033[95m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def print_header(message: str):
    """Print a header message"""
    print(f"\n{Colors.HEADER}{Colors.BOLD}{'=' * 60}{Colors.ENDC}")
    print(f"{Colors.HEADER}{Colors.BOLD}{message.center(60)}{Colors.ENDC}")
    print(f"{Colors.HEADER}{Colors.BOLD}{'=' * 60}{Colors.ENDC}\n")


def print_success(message: str):
    print(f"{Colors.OKGREEN}✓ {message}{Colors.ENDC}")


def print_error(message: str):
    print(f"{Colors.FAIL}✗ {message}{Colors.ENDC}")


def print_info(message: str):
    print(f"{Colors.OKCYAN}ℹ {message}{Colors.ENDC}")


def print_warning(message: str):
    print(f"{Colors.WARNING}⚠ {message}{Colors.ENDC}")


SAMPLE_REPORTS = [
    {
        "month": "2024-01",
        "ranking": 3,
        "improvements": ["Meet sprint deadlines", "Document decisions"],
        "qualities": ["Reliable", "Helpful in code review"],
        "summary": "Solid month with room to improve delivery pace."
    },
    {
        "month": "2024-02",
        "ranking": 4,
        "improvements": ["Share knowledge with new hires"],
        "qualities": ["Ownership", "Clear communication"],
        "summary": "Took ownership of the billing migration."
    },
    {
        "month": "2024-03",
        "ranking": 5,
        "improvements": [],
        "qualities": ["Mentoring", "Technical depth"],
        "summary": "Outstanding quarter close."
    },
]


def seed_reports(db, employee: Employee) -> List[Report]:
    reports = []
    for data in SAMPLE_REPORTS:
        report = Report(employee_id=employee.id, **data)
        db.add(report)
        reports.append(report)
    return reports


def main():
    print_header("Employee Reports API - Database Seeding")

    Base.metadata.create_all(bind=engine)
    print_success("Database tables created/verified")

    db = SessionLocal()
    try:
        owner = User(email="owner@example.com")
        db.add(owner)
        db.flush()

        organization = Organization(user_id=owner.id, name="Example Corp")
        db.add(organization)
        db.flush()

        employee = Employee(
            organization_id=organization.id,
            first_name="Jane",
            last_name="Doe",
            email="jane.doe@example.com",
            position="Software Engineer"
        )
        db.add(employee)
        db.flush()

        reports = seed_reports(db, employee)

        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = create_access_token(owner.id, expires_delta=expires_delta)
        db.add(UserSession(
            user_id=owner.id,
            token=token,
            expires_at=datetime.utcnow() + expires_delta
        ))

        db.commit()

        print_success(f"Owner: {owner.email} ({owner.id})")
        print_success(f"Organization: {organization.name} ({organization.id})")
        print_success(f"Employee: {employee.full_name} ({employee.id}) with {len(reports)} reports")
        employee_id = employee.id
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print_info("\nTry it:")
    print_info(
        f"  curl -H 'Authorization: Bearer {token}' "
        f"'http://{settings.API_HOST}:{settings.API_PORT}{settings.API_PREFIX}/reports?employeeId={employee_id}'"
    )
    print_warning(f"The token expires in {settings.ACCESS_TOKEN_EXPIRE_MINUTES} minutes.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print_warning("\n\nSeeding interrupted by user. Exiting...")
        sys.exit(0)
    except Exception as e:
        print_error(f"\n\nUnexpected error: {str(e)}")
        sys.exit(1)
