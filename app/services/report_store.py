"""
Record store used by the reports endpoint.

The endpoint only needs four queries: resolve the caller behind a bearer
token, look up an employee, look up the organization a user owns, and list
an employee's reports. ReportStore is that surface; SQLAlchemyReportStore
serves it from the application database.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import decode_token
from app.models.user import User, UserSession, Organization
from app.models.employee import Employee
from app.models.report import Report

logger = logging.getLogger(__name__)


class ReportStore(ABC):
    """Read-only queries backing the reports endpoint"""

    @abstractmethod
    def resolve_caller(self, token: Optional[str]) -> Optional[User]:
        """Return the user a bearer token belongs to, or None if it does not resolve."""

    @abstractmethod
    def get_employee(self, employee_id: str) -> Optional[Employee]:
        pass

    @abstractmethod
    def get_organization_for_owner(self, user_id: str) -> Optional[Organization]:
        pass

    @abstractmethod
    def list_reports(self, employee_id: str) -> List[Report]:
        """Reports of one employee, most recent month first."""


class SQLAlchemyReportStore(ReportStore):

    def __init__(self, db: Session):
        self.db = db

    def resolve_caller(self, token: Optional[str]) -> Optional[User]:
        if not token:
            return None

        payload = decode_token(token)
        if payload is None:
            logger.warning("Rejected bearer token: could not be decoded")
            return None

        if payload.get("type") != "access" or not payload.get("sub"):
            logger.warning("Rejected bearer token: not an access token")
            return None

        session = self.db.query(UserSession).filter(
            UserSession.token == token,
            UserSession.revoked_at.is_(None)
        ).first()

        if not session:
            logger.warning("Rejected bearer token: session not found or revoked")
            return None

        if session.expires_at < datetime.utcnow():
            logger.warning(f"Rejected bearer token: session {session.id} has expired")
            return None

        if str(session.user_id) != str(payload["sub"]):
            logger.warning(f"Rejected bearer token: subject does not match session {session.id}")
            return None

        user = self.db.query(User).filter(User.id == session.user_id).first()
        if user is None or not user.is_active:
            logger.warning(f"Rejected bearer token: user {session.user_id} missing or inactive")
            return None

        return user

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.id == employee_id).first()

    def get_organization_for_owner(self, user_id: str) -> Optional[Organization]:
        return self.db.query(Organization).filter(
            Organization.user_id == user_id
        ).order_by(Organization.created_at).first()

    def list_reports(self, employee_id: str) -> List[Report]:
        return self.db.query(Report).filter(
            Report.employee_id == employee_id
        ).order_by(Report.month.desc()).all()


def get_report_store(db: Session = Depends(get_db)) -> ReportStore:
    return SQLAlchemyReportStore(db)
