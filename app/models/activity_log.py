from typing import Any, Dict, Optional
from datetime import datetime

from sqlmodel import Field, Column, DateTime, SQLModel
from sqlalchemy import JSON


class ActivityLog(SQLModel, table=True):
    __tablename__ = "activity_logs"

    id: Optional[str] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, nullable=False)
    username: str = Field(default="")
    email: str = Field(default="")
    action: str = Field(index=True, nullable=False)
    # USER | PROBLEM | SUBMISSION | CHALLENGE | ACHIEVEMENT | SYSTEM | ADMIN
    resource_type: str = Field(default="SYSTEM")
    resource_id: Optional[str] = Field(default=None)
    resource_name: str = Field(default="")
    details: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    ip_address: Optional[str] = Field(default=None)
    user_agent: Optional[str] = Field(default=None)
    # when the action happened (primary timestamp)
    timestamp: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    # INFO | WARNING | ERROR | CRITICAL
    severity: str = Field(default="INFO", index=True)
    success: bool = Field(default=True)
