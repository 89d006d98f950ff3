from typing import Any, Dict

from sqlmodel import Field, Column
from sqlalchemy import JSON

from .base_model import TimestampedTable


class Achievement(TimestampedTable, table=True):
    __tablename__ = "achievements"

    name: str = Field(index=True, nullable=False)
    description: str = Field(default="")
    icon: str = Field(default="")
    # PROBLEM_SOLVING | STREAK | CHALLENGE | LEARNING | SOCIAL | SPECIAL
    category: str = Field(index=True)
    # COMMON | UNCOMMON | RARE | EPIC | LEGENDARY
    rarity: str = Field(default="COMMON")
    points: int = Field(default=0)
    coins: int = Field(default=0)
    xp: int = Field(default=0)
    # unlock rule, e.g. {"type": "problems_solved", "target": 10}
    requirements: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    is_active: bool = Field(default=True)
    is_hidden: bool = Field(default=False)
    display_order: int = Field(default=0)
