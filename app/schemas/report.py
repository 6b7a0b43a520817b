from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional
from datetime import datetime

class ReportResponse(BaseModel):
    """Report as returned to clients; keys are camelCase, id is exposed as _id"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    employee_id: str = Field(..., alias="employeeId")
    month: str
    # Stored evaluation content is returned as-is
    ranking: Any = None
    improvements: Any = None
    qualities: Any = None
    summary: Optional[str] = None
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_record(cls, report) -> "ReportResponse":
        # Reports have no separate update timestamp
        return cls(
            id=str(report.id),
            employee_id=str(report.employee_id),
            month=report.month,
            ranking=report.ranking,
            improvements=report.improvements,
            qualities=report.qualities,
            summary=report.summary,
            created_at=report.created_at,
            updated_at=report.created_at
        )

class ErrorResponse(BaseModel):
    error: str
