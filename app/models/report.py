from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, Text, JSON
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.user import generate_id
from datetime import datetime, timezone

class Report(Base):
    """Monthly performance evaluation of one employee"""
    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, default=generate_id)
    employee_id = Column(String(36), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    month = Column(String(7), nullable=False)  # YYYY-MM
    ranking = Column(Integer, nullable=True)
    improvements = Column(JSON, nullable=True)
    qualities = Column(JSON, nullable=True)
    summary = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    employee = relationship("Employee", back_populates="reports")
