from datetime import datetime, timezone

import pytest

from app.core.exceptions.exceptions import InvalidListQueryError
from app.schemas.filters import (
    ActivityLogFilters,
    LeaderboardFilters,
    SubmissionFilters,
    UserFilters,
    parse_filters,
)


def test_parse_picks_variant_by_resource() -> None:
    filters = parse_filters("users", {"role": "admin"})
    assert isinstance(filters, UserFilters)
    assert filters.equality_filters() == {
        "role": "admin", "status": "all", "verified": "all", "premium": "all",
    }


def test_unknown_filter_is_rejected() -> None:
    with pytest.raises(InvalidListQueryError) as exc:
        parse_filters("users", {"colour": "red"})
    assert "colour" in exc.value.message


def test_invalid_option_is_rejected() -> None:
    with pytest.raises(InvalidListQueryError) as exc:
        parse_filters("users", {"role": "superuser"})
    assert "role" in exc.value.message


def test_unknown_resource_is_rejected() -> None:
    with pytest.raises(InvalidListQueryError):
        parse_filters("planets", {})


def test_range_filters_come_from_bound_parameters() -> None:
    filters = parse_filters("submissions", {"score_min": "50", "runtime_max": "120"})
    assert isinstance(filters, SubmissionFilters)
    ranges = filters.range_filters()
    assert set(ranges) == {"score", "runtime"}
    assert ranges["score"].min == 50.0 and ranges["score"].max is None
    assert ranges["runtime"].max == 120.0
    assert "score_min" not in filters.equality_filters()


def test_leaderboard_min_score_is_lower_bound() -> None:
    filters = parse_filters("leaderboard", {"min_score": "1000", "country": "AR"})
    assert isinstance(filters, LeaderboardFilters)
    assert filters.range_filters()["score"].min == 1000.0
    assert filters.equality_filters() == {"country": "AR"}


def test_activity_log_dates_and_optional_user() -> None:
    filters = parse_filters("activity_logs", {"date_from": "2024-01-20T00:00:00Z"})
    assert isinstance(filters, ActivityLogFilters)
    assert filters.range_filters()["timestamp"].min == datetime(2024, 1, 20, tzinfo=timezone.utc)
    # unset user_id is no constraint at all
    assert "user_id" not in filters.equality_filters()


def test_category_level_accepts_all_or_number() -> None:
    assert parse_filters("categories", {"level": "2"}).equality_filters()["level"] == 2
    assert parse_filters("categories", {}).equality_filters()["level"] == "all"
