"""Admin list definitions: how each resource is searched, filtered, sorted and exported."""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from sqlmodel import SQLModel

from app.core.exceptions.exceptions import UnknownResourceError
from app.models.achievement import Achievement
from app.models.activity_log import ActivityLog
from app.models.category import Category
from app.models.challenge import Challenge
from app.models.leaderboard_entry import LeaderboardEntry
from app.models.submission import Submission
from app.models.user import AdminUser
from app.schemas.filters import ResourceFilterSet
from app.schemas.list_query import ListQuery, ListResult, SortOrder
from app.services.list_view import FilterSpec, SortSpec, apply_list_query, select_records
from app.utils.csv_export import CsvColumn, percent, yes_no

DIFFICULTY_ORDER = ("BEGINNER", "EASY", "MEDIUM", "HARD", "EXPERT")
RARITY_ORDER = ("COMMON", "UNCOMMON", "RARE", "EPIC", "LEGENDARY")
SEVERITY_ORDER = ("INFO", "WARNING", "ERROR", "CRITICAL")

ACTIVE_STATUS = FilterSpec("is_active", {"active": True, "inactive": False})


def toggle(field: str) -> FilterSpec:
    return FilterSpec(field, {"true": True, "false": False})


@dataclass(frozen=True)
class ResourceSpec:
    name: str
    model: Type[SQLModel]
    search_fields: Tuple[str, ...]
    filter_specs: Mapping[str, FilterSpec]
    sort_specs: Mapping[str, SortSpec]
    default_sort: str
    default_order: SortOrder
    csv_columns: Tuple[CsvColumn, ...]

    def build_query(
        self,
        filters: ResourceFilterSet,
        search_term: str = "",
        sort_by: Optional[str] = None,
        sort_order: Optional[SortOrder] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> ListQuery:
        return ListQuery(
            search_term=search_term,
            filters=filters.equality_filters(),
            ranges=filters.range_filters(),
            sort_by=sort_by or self.default_sort,
            sort_order=sort_order or self.default_order,
            page=page,
            page_size=page_size,
        )

    def apply(self, records: Sequence[Any], query: ListQuery) -> ListResult:
        return apply_list_query(
            records,
            query,
            search_fields=self.search_fields,
            filter_specs=self.filter_specs,
            sort_specs=self.sort_specs,
        )

    def select(self, records: Sequence[Any], query: ListQuery) -> List[Any]:
        return select_records(
            records,
            query,
            search_fields=self.search_fields,
            filter_specs=self.filter_specs,
            sort_specs=self.sort_specs,
        )


USERS = ResourceSpec(
    name="users",
    model=AdminUser,
    search_fields=("username", "email", "first_name", "last_name"),
    filter_specs={
        "role": FilterSpec("role"),
        "status": ACTIVE_STATUS,
        "verified": toggle("is_verified"),
        "premium": toggle("is_premium"),
    },
    sort_specs={
        "created_at": SortSpec("created_at", "datetime"),
        "last_login": SortSpec("last_login", "datetime"),
        "username": SortSpec("username", "text"),
        "email": SortSpec("email", "text"),
        "level": SortSpec("level", "number"),
        "xp": SortSpec("xp", "number"),
    },
    default_sort="created_at",
    default_order=SortOrder.DESC,
    csv_columns=(
        CsvColumn("ID", "id"),
        CsvColumn("Username", "username"),
        CsvColumn("Email", "email"),
        CsvColumn("First Name", "first_name"),
        CsvColumn("Last Name", "last_name"),
        CsvColumn("Role", "role"),
        CsvColumn("Level", "level"),
        CsvColumn("XP", "xp"),
        CsvColumn("Active", "is_active", yes_no),
        CsvColumn("Verified", "is_verified", yes_no),
        CsvColumn("Created At", "created_at"),
        CsvColumn("Last Login", "last_login"),
    ),
)

ACHIEVEMENTS = ResourceSpec(
    name="achievements",
    model=Achievement,
    search_fields=("name", "description"),
    filter_specs={
        "category": FilterSpec("category"),
        "rarity": FilterSpec("rarity"),
        "status": ACTIVE_STATUS,
    },
    sort_specs={
        "created_at": SortSpec("created_at", "datetime"),
        "name": SortSpec("name", "text"),
        "points": SortSpec("points", "number"),
        "rarity": SortSpec("rarity", "ordinal", RARITY_ORDER),
    },
    default_sort="created_at",
    default_order=SortOrder.DESC,
    csv_columns=(
        CsvColumn("ID", "id"),
        CsvColumn("Name", "name"),
        CsvColumn("Description", "description"),
        CsvColumn("Category", "category"),
        CsvColumn("Rarity", "rarity"),
        CsvColumn("Points", "points"),
        CsvColumn("Active", "is_active", yes_no),
        CsvColumn("Created At", "created_at"),
    ),
)

CHALLENGES = ResourceSpec(
    name="challenges",
    model=Challenge,
    search_fields=("title", "description"),
    filter_specs={
        "status": FilterSpec("status"),
        "difficulty": FilterSpec("difficulty"),
        "category": FilterSpec("category"),
        "type": FilterSpec("type"),
        "featured": toggle("featured"),
    },
    sort_specs={
        "title": SortSpec("title", "text"),
        "start_date": SortSpec("start_date", "datetime"),
        "end_date": SortSpec("end_date", "datetime"),
        "created_at": SortSpec("created_at", "datetime"),
        "prize_pool": SortSpec("prize_pool", "number"),
        "participants": SortSpec("current_participants", "number"),
        "difficulty": SortSpec("difficulty", "ordinal", DIFFICULTY_ORDER),
    },
    default_sort="title",
    default_order=SortOrder.ASC,
    csv_columns=(
        CsvColumn("ID", "id"),
        CsvColumn("Title", "title"),
        CsvColumn("Difficulty", "difficulty"),
        CsvColumn("Category", "category"),
        CsvColumn("Status", "status"),
        CsvColumn("Type", "type"),
        CsvColumn("Start Date", "start_date"),
        CsvColumn("End Date", "end_date"),
        CsvColumn("Participants", "current_participants"),
        CsvColumn("Prize Pool", "prize_pool"),
    ),
)

CATEGORIES = ResourceSpec(
    name="categories",
    model=Category,
    search_fields=("name", "description"),
    filter_specs={
        "status": ACTIVE_STATUS,
        "level": FilterSpec("level"),
        "featured": toggle("is_featured"),
    },
    sort_specs={
        "sort_order": SortSpec("sort_order", "number"),
        "name": SortSpec("name", "text"),
        "problem_count": SortSpec("problem_count", "number"),
        "avg_success_rate": SortSpec("avg_success_rate", "number"),
        "created_at": SortSpec("created_at", "datetime"),
    },
    default_sort="sort_order",
    default_order=SortOrder.ASC,
    csv_columns=(
        CsvColumn("ID", "id"),
        CsvColumn("Name", "name"),
        CsvColumn("Slug", "slug"),
        CsvColumn("Level", "level"),
        CsvColumn("Problems", "problem_count"),
        CsvColumn("Success Rate", "avg_success_rate", percent),
        CsvColumn("Active", "is_active", yes_no),
        CsvColumn("Featured", "is_featured", yes_no),
    ),
)

SUBMISSIONS = ResourceSpec(
    name="submissions",
    model=Submission,
    search_fields=("username", "problem_title", "problem_category"),
    filter_specs={
        "status": FilterSpec("status"),
        "language": FilterSpec("language"),
        "difficulty": FilterSpec("problem_difficulty"),
        "category": FilterSpec("problem_category"),
        "flagged": toggle("is_flagged"),
        "optimized": toggle("optimized"),
    },
    sort_specs={
        "submission_time": SortSpec("submission_time", "datetime"),
        "score": SortSpec("score", "number"),
        "runtime": SortSpec("runtime", "number"),
        "memory": SortSpec("memory", "number"),
        "username": SortSpec("username", "text"),
        "difficulty": SortSpec("problem_difficulty", "ordinal", DIFFICULTY_ORDER),
    },
    default_sort="submission_time",
    default_order=SortOrder.DESC,
    csv_columns=(
        CsvColumn("ID", "id"),
        CsvColumn("User", "username"),
        CsvColumn("Problem", "problem_title"),
        CsvColumn("Difficulty", "problem_difficulty"),
        CsvColumn("Language", "language"),
        CsvColumn("Status", "status"),
        CsvColumn("Score", "score"),
        CsvColumn("Runtime", "runtime"),
        CsvColumn("Memory", "memory"),
        CsvColumn("Flagged", "is_flagged", yes_no),
        CsvColumn("Submitted At", "submission_time"),
    ),
)

LEADERBOARD = ResourceSpec(
    name="leaderboard",
    model=LeaderboardEntry,
    search_fields=("username", "email"),
    filter_specs={
        "country": FilterSpec("country"),
    },
    sort_specs={
        "rank": SortSpec("rank", "number"),
        "score": SortSpec("score", "number"),
        "problems": SortSpec("total_problems", "number"),
        "acceptance_rate": SortSpec("acceptance_rate", "number"),
        "streak": SortSpec("current_streak", "number"),
        "level": SortSpec("level", "number"),
    },
    default_sort="rank",
    default_order=SortOrder.ASC,
    csv_columns=(
        CsvColumn("Rank", "rank"),
        CsvColumn("Username", "username"),
        CsvColumn("Email", "email"),
        CsvColumn("Score", "score"),
        CsvColumn("Problems", "total_problems"),
        CsvColumn("Acceptance Rate", "acceptance_rate", percent),
        CsvColumn("Streak", "current_streak"),
        CsvColumn("Level", "level"),
        CsvColumn("Country", "country"),
    ),
)

ACTIVITY_LOGS = ResourceSpec(
    name="activity_logs",
    model=ActivityLog,
    search_fields=("username", "email", "action", "resource_name"),
    filter_specs={
        "severity": FilterSpec("severity"),
        "resource_type": FilterSpec("resource_type"),
        "action": FilterSpec("action"),
        "user_id": FilterSpec("user_id"),
        "success": toggle("success"),
    },
    sort_specs={
        "timestamp": SortSpec("timestamp", "datetime"),
        "severity": SortSpec("severity", "ordinal", SEVERITY_ORDER),
        "user": SortSpec("username", "text"),
        "action": SortSpec("action", "text"),
    },
    default_sort="timestamp",
    default_order=SortOrder.DESC,
    csv_columns=(
        CsvColumn("Timestamp", "timestamp"),
        CsvColumn("Severity", "severity"),
        CsvColumn("User", "username"),
        CsvColumn("Action", "action"),
        CsvColumn("Resource Type", "resource_type"),
        CsvColumn("Resource Name", "resource_name"),
        CsvColumn("IP Address", "ip_address"),
        CsvColumn("Success", "success", yes_no),
        CsvColumn("Details", "details"),
    ),
)

RESOURCES: Dict[str, ResourceSpec] = {
    spec.name: spec
    for spec in (USERS, ACHIEVEMENTS, CHALLENGES, CATEGORIES, SUBMISSIONS, LEADERBOARD, ACTIVITY_LOGS)
}


def get_resource(name: str) -> ResourceSpec:
    try:
        return RESOURCES[name]
    except KeyError:
        raise UnknownResourceError(name) from None
