from datetime import datetime
from typing import Optional
from sqlmodel import Field, SQLModel


class TimestampedTable(SQLModel):
    # plain fields only: sa_column objects cannot be shared between subclass tables
    id: Optional[str] = Field(default=None, primary_key=True, index=True)
    created_at: datetime = Field(default_factory=datetime.now, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.now, nullable=False)
