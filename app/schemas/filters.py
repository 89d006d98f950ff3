from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from app.core.exceptions.exceptions import InvalidListQueryError
from app.schemas.list_query import RangeFilter

Toggle = Literal["all", "true", "false"]
ActiveStatus = Literal["all", "active", "inactive"]
Difficulty = Literal["all", "BEGINNER", "EASY", "MEDIUM", "HARD", "EXPERT"]


class ResourceFilterSet(BaseModel):
    """Filters accepted by one admin list. Unknown names are rejected."""
    model_config = ConfigDict(extra="forbid")

    # record field -> (lower bound attribute, upper bound attribute)
    range_fields: ClassVar[Dict[str, Tuple[Optional[str], Optional[str]]]] = {}

    def _range_attributes(self) -> set:
        return {attr for pair in self.range_fields.values() for attr in pair if attr}

    def equality_filters(self) -> Dict[str, Any]:
        skip = self._range_attributes() | {"kind"}
        return {
            name: value
            for name, value in self.model_dump().items()
            if name not in skip and value is not None
        }

    def range_filters(self) -> Dict[str, RangeFilter]:
        ranges = {}
        for field, (low_attr, high_attr) in self.range_fields.items():
            low = getattr(self, low_attr) if low_attr else None
            high = getattr(self, high_attr) if high_attr else None
            if low is not None or high is not None:
                ranges[field] = RangeFilter(min=low, max=high)
        return ranges


class UserFilters(ResourceFilterSet):
    kind: Literal["users"] = "users"
    role: Literal["all", "user", "admin", "moderator"] = "all"
    status: ActiveStatus = "all"
    verified: Toggle = "all"
    premium: Toggle = "all"
    level_min: Optional[int] = None
    level_max: Optional[int] = None

    range_fields: ClassVar = {"level": ("level_min", "level_max")}


class AchievementFilters(ResourceFilterSet):
    kind: Literal["achievements"] = "achievements"
    category: Literal["all", "PROBLEM_SOLVING", "STREAK", "CHALLENGE", "LEARNING", "SOCIAL", "SPECIAL"] = "all"
    rarity: Literal["all", "COMMON", "UNCOMMON", "RARE", "EPIC", "LEGENDARY"] = "all"
    status: ActiveStatus = "all"


class ChallengeFilters(ResourceFilterSet):
    kind: Literal["challenges"] = "challenges"
    status: Literal["all", "UPCOMING", "ACTIVE", "COMPLETED", "CANCELLED"] = "all"
    difficulty: Difficulty = "all"
    category: str = "all"
    type: Literal["all", "WEEKLY", "MONTHLY", "SPECIAL", "DAILY"] = "all"
    featured: Toggle = "all"


class CategoryFilters(ResourceFilterSet):
    kind: Literal["categories"] = "categories"
    status: ActiveStatus = "all"
    level: Union[Literal["all"], int] = "all"
    featured: Toggle = "all"


class SubmissionFilters(ResourceFilterSet):
    kind: Literal["submissions"] = "submissions"
    status: Literal[
        "all", "PENDING", "RUNNING", "ACCEPTED", "WRONG_ANSWER", "TIME_LIMIT_EXCEEDED",
        "MEMORY_LIMIT_EXCEEDED", "RUNTIME_ERROR", "COMPILATION_ERROR",
    ] = "all"
    language: str = "all"
    difficulty: Difficulty = "all"
    category: str = "all"
    flagged: Toggle = "all"
    optimized: Toggle = "all"
    score_min: Optional[float] = None
    score_max: Optional[float] = None
    runtime_min: Optional[float] = None
    runtime_max: Optional[float] = None

    range_fields: ClassVar = {
        "score": ("score_min", "score_max"),
        "runtime": ("runtime_min", "runtime_max"),
    }


class LeaderboardFilters(ResourceFilterSet):
    kind: Literal["leaderboard"] = "leaderboard"
    country: str = "all"
    level_min: Optional[int] = None
    level_max: Optional[int] = None
    min_score: Optional[float] = None

    range_fields: ClassVar = {
        "level": ("level_min", "level_max"),
        "score": ("min_score", None),
    }


class ActivityLogFilters(ResourceFilterSet):
    kind: Literal["activity_logs"] = "activity_logs"
    severity: Literal["all", "INFO", "WARNING", "ERROR", "CRITICAL"] = "all"
    resource_type: Literal["all", "USER", "PROBLEM", "SUBMISSION", "CHALLENGE", "ACHIEVEMENT", "SYSTEM", "ADMIN"] = "all"
    action: str = "all"
    user_id: Optional[str] = None
    success: Toggle = "all"
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    range_fields: ClassVar = {"timestamp": ("date_from", "date_to")}


ResourceFilters = Annotated[
    Union[
        UserFilters,
        AchievementFilters,
        ChallengeFilters,
        CategoryFilters,
        SubmissionFilters,
        LeaderboardFilters,
        ActivityLogFilters,
    ],
    Field(discriminator="kind"),
]

_filters_adapter = TypeAdapter(ResourceFilters)


def parse_filters(resource: str, params: Mapping[str, Any]) -> ResourceFilterSet:
    """Validate raw filter parameters for `resource` into its filter variant."""
    try:
        return _filters_adapter.validate_python({**params, "kind": resource})
    except ValidationError as e:
        # first loc element is the union tag
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'][1:]) or 'kind'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidListQueryError(problems) from e
