from typing import Optional

from sqlmodel import Field

from .base_model import TimestampedTable


class Category(TimestampedTable, table=True):
    __tablename__ = "categories"

    name: str = Field(index=True, nullable=False)
    slug: str = Field(index=True, unique=True, nullable=False)
    description: str = Field(default="")
    icon: str = Field(default="")
    color: str = Field(default="#3B82F6")
    # parent category for nested topics (level > 1)
    parent_id: Optional[str] = Field(default=None, foreign_key="categories.id")
    level: int = Field(default=1)
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)
    is_featured: bool = Field(default=False)
    problem_count: int = Field(default=0)
    avg_success_rate: float = Field(default=0.0)
    total_submissions: int = Field(default=0)
