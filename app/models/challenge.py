from typing import Optional
from datetime import datetime

from sqlmodel import Field, Column, DateTime

from .base_model import TimestampedTable


class Challenge(TimestampedTable, table=True):
    __tablename__ = "challenges"

    title: str = Field(index=True, nullable=False)
    description: str = Field(default="")
    # BEGINNER | EASY | MEDIUM | HARD | EXPERT
    difficulty: str = Field(default="MEDIUM")
    category: str = Field(default="")
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    max_participants: int = Field(default=0)
    current_participants: int = Field(default=0)
    prize_pool: int = Field(default=0)
    # UPCOMING | ACTIVE | COMPLETED | CANCELLED
    status: str = Field(default="UPCOMING", index=True)
    # WEEKLY | MONTHLY | SPECIAL | DAILY
    type: str = Field(default="WEEKLY")
    leaderboard: bool = Field(default=True)
    rated: bool = Field(default=True)
    featured: bool = Field(default=False)
