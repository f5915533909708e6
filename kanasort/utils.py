from __future__ import annotations
import logging
from functools import cmp_to_key
from io import BytesIO
from typing import Any, Iterable, List, Optional

import pandas as pd

from .collation import compare_keys, sort_records
from .grouping import Group, group_and_sort, group_label
from .normalize import normalize_kana, widen_kana
from .records import FIELDS, SortableRecord, as_sortable, get_value
from .resolver import ReadingResolver, default_resolver

logger = logging.getLogger(__name__)

READING_COLUMN = "読み"
GROUP_COLUMN = "グループ"

# card attributes matched by the search box
SEARCH_ATTRS = ("name", "company", "department", "position", "email")


def _check_field(field: str) -> None:
    if field not in FIELDS:
        raise ValueError(f"Unsupported sort field: {field}")


def sort_by_primary_field(
    records: Iterable[Any],
    field: str = "name",
    resolver: Optional[ReadingResolver] = None,
) -> List[Any]:
    """Return a sorted copy of ``records`` by name or company reading."""
    _check_field(field)
    return sort_records(
        records, key=lambda rec: as_sortable(rec, field), resolver=resolver
    )


def group_by_primary_field(
    records: Iterable[Any],
    field: str = "name",
    resolver: Optional[ReadingResolver] = None,
) -> List[Group]:
    """Sort ``records`` and split them into gojuon sections."""
    ordered = sort_by_primary_field(records, field, resolver)
    groups = group_and_sort(
        ordered, key=lambda rec: as_sortable(rec, field), resolver=resolver
    )
    logger.debug("grouped %d records into %d sections", len(ordered), len(groups))
    return groups


def _fold(text: str) -> str:
    """Return ``text`` as spaceless lowercase hiragana for loose matching."""
    return "".join(normalize_kana(widen_kana(text)).lower().split())


def filter_cards(
    records: Iterable[Any],
    query: str | None,
    resolver: Optional[ReadingResolver] = None,
) -> List[Any]:
    """Return the records matching the search ``query``.

    Plain text is matched case-insensitively against the card attributes.
    Kana queries additionally match the resolved name and company readings,
    so ``タナカ`` finds a card filed as ``田中``.
    """
    records = list(records)
    if not query or not query.strip():
        return records
    resolver = resolver or default_resolver()
    needle = query.strip().lower()
    folded = _fold(query)

    matched = []
    for rec in records:
        values = [get_value(rec, attr) for attr in SEARCH_ATTRS]
        texts = [str(v) for v in values if v]
        if any(needle in text.lower() for text in texts):
            matched.append(rec)
            continue
        readings = []
        for field in FIELDS:
            sortable = as_sortable(rec, field)
            readings.append(resolver.resolve(sortable.display_name, sortable.reading))
        if any(folded in _fold(text) for text in texts + readings):
            matched.append(rec)
    return matched


def sort_dataframe(
    df: pd.DataFrame,
    name_col: str,
    reading_col: str | None = None,
    resolver: Optional[ReadingResolver] = None,
) -> pd.DataFrame:
    """Return ``df`` sorted in gojuon order with reading and group columns.

    Parameters
    ----------
    df : pd.DataFrame
        Input data, one card per row.
    name_col : str
        Column holding the display name (person or company).
    reading_col : str | None
        Optional column with an explicit kana reading. A missing column is
        treated as empty.
    resolver : ReadingResolver | None
        Resolver to use, defaults to the compiled-in dictionary.
    """
    if name_col not in df.columns:
        raise ValueError(f"Unknown column: {name_col}")
    resolver = resolver or default_resolver()

    has_reading = reading_col is not None and reading_col in df.columns
    readings = df[reading_col] if has_reading else ["" for _ in range(len(df))]

    keys: list[str] = []
    labels: list[str] = []
    for name_val, reading_val in zip(df[name_col], readings):
        name = "" if pd.isna(name_val) else str(name_val)
        reading = "" if pd.isna(reading_val) else str(reading_val)
        record = SortableRecord(name, reading or None)
        keys.append(resolver.resolve(name, reading))
        labels.append(group_label(record, resolver))

    out = df.copy()
    out[READING_COLUMN] = keys
    out[GROUP_COLUMN] = labels
    compare = cmp_to_key(compare_keys)
    order = sorted(range(len(out)), key=lambda idx: compare(keys[idx]))
    logger.debug("sorted %d rows by %s", len(out), name_col)
    return out.iloc[order].reset_index(drop=True)


def to_excel_bytes(df: pd.DataFrame) -> bytes:
    """Return Excel bytes for ``df`` using ``openpyxl``."""
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        df.to_excel(writer, index=False)
    return buf.getvalue()
