"""Search, filter, sort and paginate an in-memory record collection.

Every admin list screen renders the same way: the full collection is loaded
once, then each keystroke, filter change, sort click or page change derives
the visible page again. The steps below run in a fixed order
(search -> filter -> sort -> paginate) and are pure functions of their
inputs, so they can be called on every change without synchronisation.

Records may be mappings or plain objects; fields are read with
`record[field]` or `getattr(record, field)` respectively.
"""
import unicodedata
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from app.core.exceptions.exceptions import InvalidListQueryError
from app.schemas.list_query import ALL, ListQuery, ListResult, RangeFilter, SortOrder

MISSING = object()

# sort key for a missing or unusable value: before every real value
_MIN_KEY: Tuple = (0,)


@dataclass(frozen=True)
class FilterSpec:
    """Maps a filter name onto a record field.

    `values` translates the option picked in the UI into the stored value,
    e.g. status "active" -> is_active True.
    """
    field: str
    values: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class SortSpec:
    """Maps a sort key onto a record field and says how to compare it.

    kind is one of auto, text, number, datetime, bool, ordinal. Ordinal
    fields rank by their position in `order`.
    """
    field: str
    kind: str = "auto"
    order: Sequence[str] = ()


def field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field, MISSING)
    return getattr(record, field, MISSING)


def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _timestamp(value: datetime) -> float:
    if value.tzinfo is None:
        # naive timestamps are stored as UTC
        return (value - datetime(1970, 1, 1)).total_seconds()
    return value.timestamp()


def collation_key(text: str) -> Tuple[str, str]:
    """Dictionary-order key: accents and case are ignored first, then break ties."""
    folded = text.casefold()
    base = "".join(ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch))
    return (base, folded)


def comparable(value: Any, kind: str = "auto", order: Sequence[str] = ()) -> Tuple:
    """Return a tuple that orders `value` among values of the same field."""
    if value is MISSING or value is None:
        return _MIN_KEY

    if kind == "ordinal":
        return (1, 0, order.index(value)) if value in order else _MIN_KEY
    if kind == "datetime":
        parsed = _parse_datetime(value)
        return (1, 2, _timestamp(parsed)) if parsed else _MIN_KEY
    if kind == "number":
        try:
            return (1, 1, float(value))
        except (TypeError, ValueError):
            return _MIN_KEY
    if kind == "bool":
        return (1, 1, int(bool(value)))
    if kind == "text":
        return (1, 3, collation_key(str(value)))

    if isinstance(value, (bool, int, float)):
        return (1, 1, float(value))
    if isinstance(value, (datetime, date)):
        return (1, 2, _timestamp(_parse_datetime(value)))
    if isinstance(value, str):
        return (1, 3, collation_key(value))
    return (1, 4, str(value))


def search_records(records: Iterable[Any], term: str, fields: Sequence[str]) -> List[Any]:
    """Keep records where any of `fields` contains `term`, ignoring case."""
    records = list(records)
    if not term:
        return records

    needle = term.casefold()
    matched = []
    for record in records:
        for field in fields:
            value = field_value(record, field)
            if value is MISSING or value is None:
                continue
            if needle in str(value).casefold():
                matched.append(record)
                break
    return matched


def filter_records(
    records: Iterable[Any],
    filters: Mapping[str, Any],
    specs: Optional[Mapping[str, FilterSpec]] = None,
) -> List[Any]:
    """AND together equality filters; an `"all"` value leaves that filter off."""
    specs = specs or {}
    active = []
    for name, option in filters.items():
        if option == ALL:
            continue
        spec = specs.get(name) or FilterSpec(field=name)
        expected = spec.values.get(option, option) if spec.values else option
        active.append((spec.field, expected))

    return [
        record for record in records
        if all(field_value(record, field) == expected for field, expected in active)
    ]


def range_filter_records(
    records: Iterable[Any],
    ranges: Mapping[str, RangeFilter],
    sort_specs: Optional[Mapping[str, SortSpec]] = None,
) -> List[Any]:
    """Keep records whose field falls inside every inclusive range."""
    kinds = {spec.field: spec for spec in (sort_specs or {}).values()}
    bounded = []
    for field, bounds in ranges.items():
        if bounds.min is None and bounds.max is None:
            continue
        spec = kinds.get(field) or SortSpec(field=field)
        low = comparable(bounds.min, spec.kind, spec.order) if bounds.min is not None else None
        high = comparable(bounds.max, spec.kind, spec.order) if bounds.max is not None else None
        bounded.append((spec, low, high))

    kept = []
    for record in records:
        for spec, low, high in bounded:
            key = comparable(field_value(record, spec.field), spec.kind, spec.order)
            if key == _MIN_KEY:
                break
            if low is not None and key < low:
                break
            if high is not None and key > high:
                break
        else:
            kept.append(record)
    return kept


def sort_records(
    records: Iterable[Any],
    sort_by: Optional[str],
    sort_order: SortOrder = SortOrder.ASC,
    specs: Optional[Mapping[str, SortSpec]] = None,
) -> List[Any]:
    """Stable sort by `sort_by`; descending reverses the ascending order."""
    records = list(records)
    if not sort_by:
        return records

    spec = (specs or {}).get(sort_by) or SortSpec(field=sort_by)
    return sorted(
        records,
        key=lambda record: comparable(field_value(record, spec.field), spec.kind, spec.order),
        reverse=sort_order == SortOrder.DESC,
    )


def paginate(records: Sequence[Any], page: int, page_size: int) -> List[Any]:
    if page_size < 1:
        raise InvalidListQueryError(f"page_size must be at least 1, got {page_size}")
    page = max(1, page)
    start = (page - 1) * page_size
    return list(records[start:start + page_size])


def select_records(
    records: Iterable[Any],
    query: ListQuery,
    *,
    search_fields: Sequence[str],
    filter_specs: Optional[Mapping[str, FilterSpec]] = None,
    sort_specs: Optional[Mapping[str, SortSpec]] = None,
) -> List[Any]:
    """Every record matching `query`, sorted, before pagination."""
    matched = search_records(records, query.search_term, search_fields)
    matched = filter_records(matched, query.filters, filter_specs)
    matched = range_filter_records(matched, query.ranges, sort_specs)
    return sort_records(matched, query.sort_by, query.sort_order, sort_specs)


def apply_list_query(
    records: Iterable[Any],
    query: ListQuery,
    *,
    search_fields: Sequence[str],
    filter_specs: Optional[Mapping[str, FilterSpec]] = None,
    sort_specs: Optional[Mapping[str, SortSpec]] = None,
) -> ListResult:
    matched = select_records(
        records,
        query,
        search_fields=search_fields,
        filter_specs=filter_specs,
        sort_specs=sort_specs,
    )
    return ListResult(
        items=paginate(matched, query.page, query.page_size),
        total_matched=len(matched),
        page=query.page,
        page_size=query.page_size,
    )


def distinct_values(records: Iterable[Any], field: str) -> List[Any]:
    """Sorted distinct non-empty values of `field` (facet options for a filter)."""
    seen = []
    for record in records:
        value = field_value(record, field)
        if value is MISSING or value is None or value == "" or value in seen:
            continue
        seen.append(value)
    return sorted(seen, key=comparable)
