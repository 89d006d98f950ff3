import math
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

# filter value meaning "no constraint"
ALL = "all"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class RangeFilter(BaseModel):
    """Inclusive bounds on one field; a missing bound is open."""
    min: Optional[Any] = None
    max: Optional[Any] = None


class ListQuery(BaseModel):
    search_term: str = ""
    filters: Dict[str, Any] = Field(default_factory=dict)
    ranges: Dict[str, RangeFilter] = Field(default_factory=dict)
    sort_by: Optional[str] = None
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1
    page_size: int = Field(default=20, ge=1)

    @field_validator("page", mode="before")
    @classmethod
    def clamp_page(cls, value: Any) -> int:
        return max(1, int(value))


class ListResult(BaseModel):
    items: List[Any]
    total_matched: int = Field(ge=0)
    page: int = 1
    page_size: int = 20

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_matched / self.page_size) if self.page_size else 0
