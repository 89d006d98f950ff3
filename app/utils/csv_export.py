import csv
import io
import json
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

from app.services.list_view import MISSING, field_value


@dataclass(frozen=True)
class CsvColumn:
    header: str
    field: str
    formatter: Optional[Callable[[Any], str]] = None


def render_cell(value: Any) -> str:
    if value is MISSING or value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def percent(value: Any) -> str:
    if value is None:
        return ""
    return f"{float(value):.1f}%"


def _columns_from_records(records: Sequence[Any]) -> List[CsvColumn]:
    fields: List[str] = []
    for record in records:
        keys = record.keys() if hasattr(record, "keys") else vars(record).keys()
        for key in keys:
            if key not in fields and not key.startswith("_"):
                fields.append(key)
    return [CsvColumn(header=field, field=field) for field in fields]


def to_csv(items: Iterable[Any], columns: Optional[Sequence[CsvColumn]] = None) -> str:
    """Render records as CSV text: a header row, then one row per record.

    Cells holding the delimiter, a quote or a line break are quoted and inner
    quotes doubled. Without `columns`, every key seen in the records becomes a
    column, in first-seen order.
    """
    records = list(items)
    columns = list(columns) if columns is not None else _columns_from_records(records)

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL)
    writer.writerow([column.header for column in columns])
    for record in records:
        row = []
        for column in columns:
            value = field_value(record, column.field)
            if column.formatter and value is not MISSING:
                row.append(column.formatter(value))
            else:
                row.append(render_cell(value))
        writer.writerow(row)
    return buffer.getvalue()
