"""
Reports API Endpoints
"""
import logging
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import List, Optional

from app.core.exceptions import (
    ReportsAPIError,
    ValidationError,
    AuthError,
    NotFoundError,
    ForbiddenError,
    InternalError
)
from app.schemas.report import ReportResponse, ErrorResponse
from app.services.report_store import ReportStore, get_report_store

logger = logging.getLogger(__name__)

router = APIRouter()

bearer = HTTPBearer(auto_error=False)

FETCH_FAILED = "Failed to fetch reports"


def fetch_employee_reports(
    store: ReportStore,
    employee_id: Optional[str],
    token: Optional[str]
) -> List[ReportResponse]:
    """Run the access checks for one employee and return their reports, newest month first"""
    if not employee_id:
        logger.warning("Reports request without employeeId")
        raise ValidationError("Employee ID is required")

    user = store.resolve_caller(token)
    if user is None:
        logger.warning("Reports request without a valid caller")
        raise AuthError("Authentication required")

    employee = store.get_employee(employee_id)
    if employee is None:
        logger.warning(f"Employee {employee_id} not found (caller {user.id})")
        raise NotFoundError("Employee not found")

    organization = store.get_organization_for_owner(user.id)
    if organization is None:
        logger.warning(f"No organization owned by caller {user.id}")
        raise NotFoundError("Organization not found")

    if str(employee.organization_id) != str(organization.id):
        logger.warning(
            f"Caller {user.id} (organization {organization.id}) denied reports "
            f"of employee {employee_id} (organization {employee.organization_id})"
        )
        raise ForbiddenError("Employee not found in your organization")

    try:
        reports = store.list_reports(employee_id)
    except Exception as e:
        logger.error(f"Error fetching reports for employee {employee_id}: {str(e)}", exc_info=True)
        raise InternalError(FETCH_FAILED) from e

    return [ReportResponse.from_record(report) for report in reports]


@router.get(
    "",
    response_model=List[ReportResponse],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)
def get_reports(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    store: ReportStore = Depends(get_report_store)
):
    """Get all reports for an employee of the caller's organization"""
    token = credentials.credentials if credentials else None

    try:
        return fetch_employee_reports(store, employee_id, token)
    except ReportsAPIError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_body())
    except Exception as e:
        logger.error(f"Failed to fetch reports: {str(e)}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED})
