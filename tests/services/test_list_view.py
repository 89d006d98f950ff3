"""Tests for the search -> filter -> sort -> paginate pipeline."""

from dataclasses import dataclass

import pytest

from app.core.exceptions.exceptions import InvalidListQueryError
from app.schemas.list_query import ListQuery, RangeFilter, SortOrder
from app.services.list_view import (
    FilterSpec,
    SortSpec,
    apply_list_query,
    comparable,
    distinct_values,
    filter_records,
    paginate,
    range_filter_records,
    search_records,
    sort_records,
)


def names(records):
    return [record["name"] for record in records]


def run(records, **query):
    return apply_list_query(records, ListQuery(**query), search_fields=["name"])


def test_active_by_score_desc_first_page(scored_records) -> None:
    result = run(
        scored_records,
        filters={"status": "active"},
        sort_by="score",
        sort_order=SortOrder.DESC,
        page=1,
        page_size=2,
    )
    assert names(result.items) == ["C", "A"]
    assert result.total_matched == 3
    assert result.total_pages == 2


def test_active_by_score_desc_second_page(scored_records) -> None:
    result = run(
        scored_records,
        filters={"status": "active"},
        sort_by="score",
        sort_order="desc",
        page=2,
        page_size=2,
    )
    assert names(result.items) == ["D"]
    assert result.total_matched == 3


def test_total_counts_matches_not_collection(scored_records) -> None:
    result = run(scored_records, filters={"status": "inactive"}, page_size=1)
    assert len(result.items) == 1
    assert result.total_matched == 2


def test_page_past_end_is_empty_but_keeps_total(scored_records) -> None:
    result = run(scored_records, page=10, page_size=2)
    assert result.items == []
    assert result.total_matched == 5


def test_search_is_case_insensitive_substring() -> None:
    records = [
        {"username": "JohnDoe", "email": "john@example.com"},
        {"username": "jane", "email": "JANE@Example.com"},
        {"username": "bob", "email": None},
    ]
    assert search_records(records, "JOHN", ["username", "email"]) == [records[0]]
    assert search_records(records, "example", ["username", "email"]) == records[:2]
    assert search_records(records, "", ["username"]) == records


def test_search_ignores_missing_fields() -> None:
    records = [{"title": "Two Sum"}, {"description": "sum of pairs"}]
    assert search_records(records, "sum", ["title"]) == [records[0]]


def test_all_sentinel_disables_filter(scored_records) -> None:
    assert filter_records(scored_records, {"status": "all"}) == scored_records
    assert names(filter_records(scored_records, {"status": "active"})) == ["A", "C", "D"]


def test_filters_are_anded() -> None:
    records = [
        {"role": "admin", "is_active": True},
        {"role": "admin", "is_active": False},
        {"role": "user", "is_active": True},
    ]
    specs = {"status": FilterSpec("is_active", {"active": True, "inactive": False})}
    assert filter_records(records, {"role": "admin", "status": "active"}, specs) == [records[0]]
    assert filter_records(records, {"role": "all", "status": "inactive"}, specs) == [records[1]]


def test_sort_is_stable_for_equal_keys() -> None:
    records = [
        {"name": "first", "score": 1},
        {"name": "second", "score": 2},
        {"name": "third", "score": 1},
        {"name": "fourth", "score": 2},
    ]
    assert names(sort_records(records, "score")) == ["first", "third", "second", "fourth"]
    assert names(sort_records(records, "score", SortOrder.DESC)) == ["second", "fourth", "first", "third"]


def test_sort_without_key_keeps_order(scored_records) -> None:
    assert sort_records(scored_records, None) == scored_records


def test_missing_sort_values_go_first_ascending_last_descending() -> None:
    records = [{"name": "a", "last_login": "2024-01-02T00:00:00Z"}, {"name": "b"}, {"name": "c", "last_login": None}]
    specs = {"last_login": SortSpec("last_login", "datetime")}
    assert names(sort_records(records, "last_login", SortOrder.ASC, specs)) == ["b", "c", "a"]
    assert names(sort_records(records, "last_login", SortOrder.DESC, specs)) == ["a", "b", "c"]


def test_text_sort_is_case_insensitive() -> None:
    records = [{"name": "bravo"}, {"name": "Alpha"}, {"name": "charlie"}]
    assert names(sort_records(records, "name")) == ["Alpha", "bravo", "charlie"]


def test_datetime_sort_uses_instants() -> None:
    records = [
        {"name": "late", "at": "2024-01-01T12:00:00Z"},
        {"name": "early", "at": "2024-01-01T13:00:00+03:00"},
    ]
    specs = {"at": SortSpec("at", "datetime")}
    assert names(sort_records(records, "at", specs=specs)) == ["early", "late"]


def test_ordinal_sort_ranks_by_position() -> None:
    records = [{"name": "x", "difficulty": "hard"}, {"name": "y", "difficulty": "easy"}, {"name": "z", "difficulty": "medium"}]
    specs = {"difficulty": SortSpec("difficulty", "ordinal", ("easy", "medium", "hard"))}
    assert names(sort_records(records, "difficulty", specs=specs)) == ["y", "z", "x"]


def test_sort_key_can_map_to_other_field() -> None:
    records = [{"name": "a", "total_problems": 9}, {"name": "b", "total_problems": 3}]
    specs = {"problems": SortSpec("total_problems", "number")}
    assert names(sort_records(records, "problems", specs=specs)) == ["b", "a"]


def test_sort_reads_object_attributes() -> None:
    @dataclass
    class Row:
        name: str
        score: int

    rows = [Row("a", 3), Row("b", 1)]
    assert [row.name for row in sort_records(rows, "score")] == ["b", "a"]


def test_range_filter_is_inclusive_and_drops_missing() -> None:
    records = [{"name": "a", "score": 10}, {"name": "b", "score": 20}, {"name": "c"}, {"name": "d", "score": 30}]
    kept = range_filter_records(records, {"score": RangeFilter(min=10, max=20)})
    assert names(kept) == ["a", "b"]
    assert names(range_filter_records(records, {"score": RangeFilter(min=25)})) == ["d"]
    assert range_filter_records(records, {"score": RangeFilter()}) == records


def test_range_filter_uses_datetime_kind_from_sort_specs() -> None:
    records = [{"name": "a", "timestamp": "2024-01-10T00:00:00Z"}, {"name": "b", "timestamp": "2024-02-10T00:00:00Z"}]
    specs = {"timestamp": SortSpec("timestamp", "datetime")}
    kept = range_filter_records(records, {"timestamp": RangeFilter(min="2024-02-01T00:00:00Z")}, specs)
    assert names(kept) == ["b"]


def test_paginate_clamps_page_and_rejects_bad_size() -> None:
    assert paginate([1, 2, 3], 0, 2) == [1, 2]
    assert paginate([1, 2, 3], -4, 2) == [1, 2]
    with pytest.raises(InvalidListQueryError):
        paginate([1, 2, 3], 1, 0)


def test_list_query_clamps_page_and_validates_size() -> None:
    assert ListQuery(page=0).page == 1
    with pytest.raises(ValueError):
        ListQuery(page_size=0)


def test_pipeline_does_not_mutate_input(scored_records) -> None:
    snapshot = [dict(record) for record in scored_records]
    run(scored_records, search_term="a", sort_by="score", sort_order="desc")
    assert scored_records == snapshot


def test_distinct_values_are_sorted_and_skip_empty() -> None:
    records = [{"country": "US"}, {"country": "AR"}, {"country": None}, {"country": ""}, {"country": "US"}, {}]
    assert distinct_values(records, "country") == ["AR", "US"]


def test_text_sort_places_accented_names_by_base_letter() -> None:
    records = [{"name": "Zoe"}, {"name": "Émile"}, {"name": "Adam"}, {"name": "emma"}]
    specs = {"name": SortSpec("name", "text")}
    assert names(sort_records(records, "name", SortOrder.ASC, specs)) == ["Adam", "Émile", "emma", "Zoe"]
    assert names(sort_records(records, "name", SortOrder.DESC, specs)) == ["Zoe", "emma", "Émile", "Adam"]


def test_accent_only_difference_breaks_ties_deterministically() -> None:
    assert comparable("resume", "text") < comparable("résumé", "text")
    assert comparable("Resume") == comparable("resume")
