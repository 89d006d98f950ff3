from typing import Optional
from datetime import datetime

from sqlmodel import Field, Column, DateTime
from sqlalchemy import Text

from .base_model import TimestampedTable


class Submission(TimestampedTable, table=True):
    __tablename__ = "submissions"

    user_id: str = Field(index=True, nullable=False)
    username: str = Field(default="")
    problem_id: str = Field(index=True, nullable=False)
    problem_title: str = Field(default="")
    problem_difficulty: str = Field(default="EASY")
    problem_category: str = Field(default="")
    code: str = Field(default="", sa_column=Column(Text, nullable=False))
    language: str = Field(default="javascript")
    # PENDING | RUNNING | ACCEPTED | WRONG_ANSWER | TIME_LIMIT_EXCEEDED | ...
    status: str = Field(default="PENDING", index=True)
    runtime: float = Field(default=0)
    memory: float = Field(default=0)
    score: float = Field(default=0)
    test_cases_passed: int = Field(default=0)
    total_test_cases: int = Field(default=0)
    submission_time: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    execution_time: float = Field(default=0)
    error_message: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    is_flagged: bool = Field(default=False)
    plagiarism_score: float = Field(default=0)
    optimized: bool = Field(default=False)
