from typing import Optional
from datetime import datetime

from sqlmodel import Field, Column, DateTime, SQLModel


class AdminUser(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[str] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True, nullable=False)
    email: str = Field(index=True, unique=True, nullable=False)
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    avatar: Optional[str] = Field(default=None)
    level: int = Field(default=1)
    xp: int = Field(default=0)
    coins: int = Field(default=0)
    streak: int = Field(default=0)
    is_active: bool = Field(default=True)
    is_verified: bool = Field(default=False)
    is_premium: bool = Field(default=False)
    # user | admin | moderator
    role: str = Field(default="user", index=True)
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    submissions_count: int = Field(default=0)
    achievements_count: int = Field(default=0)
    country: Optional[str] = Field(default=None)
    bio: Optional[str] = Field(default=None)
