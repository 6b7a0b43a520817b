"""
Test configuration and fixtures for the reports API.
"""

import os

# Point the application at an in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.database import Base, SessionLocal, engine
from app.models.user import User, Organization
from app.models.employee import Employee
from app.models.report import Report
from app.services.report_store import ReportStore, get_report_store


class InMemoryReportStore(ReportStore):
    """ReportStore over plain dictionaries that records every call made to it."""

    def __init__(self):
        self.tokens: Dict[str, User] = {}
        self.employees: Dict[str, Employee] = {}
        self.organizations: List[Organization] = []
        self.reports: List[Report] = []
        self.calls: List[str] = []
        self.fail_on: Optional[str] = None

    def _record(self, name):
        self.calls.append(name)
        if self.fail_on == name:
            raise RuntimeError(f"{name} failed: connection reset")

    def resolve_caller(self, token):
        self._record("resolve_caller")
        if not token:
            return None
        return self.tokens.get(token)

    def get_employee(self, employee_id):
        self._record("get_employee")
        return self.employees.get(employee_id)

    def get_organization_for_owner(self, user_id):
        self._record("get_organization_for_owner")
        for organization in self.organizations:
            if organization.user_id == user_id:
                return organization
        return None

    def list_reports(self, employee_id):
        self._record("list_reports")
        reports = [r for r in self.reports if r.employee_id == employee_id]
        return sorted(reports, key=lambda r: r.month, reverse=True)


@pytest.fixture
def fake_store():
    """
    U1 owns O1 which employs E1 (reports for 2024-01 and 2024-03) and E3 (no
    reports). U2 owns O2 which employs E2. U3 owns no organization.
    """
    store = InMemoryReportStore()

    u1 = User(id="U1", email="u1@example.com", is_active=True)
    u2 = User(id="U2", email="u2@example.com", is_active=True)
    u3 = User(id="U3", email="u3@example.com", is_active=True)
    store.tokens = {"token-u1": u1, "token-u2": u2, "token-u3": u3}

    store.organizations = [
        Organization(id="O1", user_id="U1", name="Org One"),
        Organization(id="O2", user_id="U2", name="Org Two"),
    ]

    store.employees = {
        "E1": Employee(id="E1", organization_id="O1", first_name="Ada", last_name="Lovelace"),
        "E2": Employee(id="E2", organization_id="O2", first_name="Alan", last_name="Turing"),
        "E3": Employee(id="E3", organization_id="O1", first_name="Grace", last_name="Hopper"),
    }

    store.reports = [
        Report(
            id="R1",
            employee_id="E1",
            month="2024-01",
            ranking=3,
            improvements=["Estimate tasks more carefully"],
            qualities=["Reliable"],
            summary="Steady start to the year.",
            created_at=datetime(2024, 2, 1, 9, 30, 0),
        ),
        Report(
            id="R3",
            employee_id="E1",
            month="2024-03",
            ranking=5,
            improvements=[],
            qualities=["Mentoring", "Ownership"],
            summary="Excellent month.",
            created_at=datetime(2024, 4, 1, 9, 30, 0),
        ),
        Report(
            id="R9",
            employee_id="E2",
            month="2024-02",
            ranking=2,
            improvements=["Testing"],
            qualities=["Curious"],
            summary="Other organization.",
            created_at=datetime(2024, 3, 1, 9, 30, 0),
        ),
    ]
    return store


@pytest.fixture
def client(fake_store):
    """Test client whose reports endpoint is served by the in-memory store."""
    app.dependency_overrides[get_report_store] = lambda: fake_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Session on a freshly created in-memory SQLite schema."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
