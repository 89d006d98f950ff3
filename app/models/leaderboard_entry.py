from typing import Optional
from datetime import datetime

from sqlmodel import Field, Column, DateTime, SQLModel


class LeaderboardEntry(SQLModel, table=True):
    __tablename__ = "leaderboard_entries"

    id: Optional[str] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, nullable=False)
    username: str = Field(default="")
    email: str = Field(default="")
    avatar: Optional[str] = Field(default=None)
    rank: int = Field(default=0, index=True)
    previous_rank: int = Field(default=0)
    score: int = Field(default=0)
    total_problems: int = Field(default=0)
    total_submissions: int = Field(default=0)
    accepted_submissions: int = Field(default=0)
    acceptance_rate: float = Field(default=0.0)
    current_streak: int = Field(default=0)
    max_streak: int = Field(default=0)
    total_xp: int = Field(default=0)
    level: int = Field(default=1)
    coins: int = Field(default=0)
    country: Optional[str] = Field(default=None)
    joined_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    last_active_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    achievements: int = Field(default=0)
