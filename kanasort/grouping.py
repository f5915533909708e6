from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from .normalize import SMALL_KANA_BASE, normalize_kana
from .records import SortableRecord
from .resolver import ReadingResolver, default_resolver

OTHER_LABEL = "#"

# section labels in display order
GROUP_LABELS = [
    "あ", "い", "う", "え", "お",
    "か", "き", "く", "け", "こ",
    "さ", "し", "す", "せ", "そ",
    "た", "ち", "つ", "て", "と",
    "な", "に", "ぬ", "ね", "の",
    "は", "ひ", "ふ", "へ", "ほ",
    "ま", "み", "む", "め", "も",
    "や", "ゆ", "よ",
    "ら", "り", "る", "れ", "ろ",
    "わ", "ゐ", "ゑ", "を", "ん",
]

_VARIANT_ROWS = {
    "かきくけこ": ["がぎぐげご"],
    "さしすせそ": ["ざじずぜぞ"],
    "たちつてと": ["だぢづでど"],
    "はひふへほ": ["ばびぶべぼ", "ぱぴぷぺぽ"],
}


def _build_label_table() -> Dict[str, str]:
    table = {label: label for label in GROUP_LABELS}
    for base_row, variant_rows in _VARIANT_ROWS.items():
        for row in variant_rows:
            table.update(zip(row, base_row))
    table.update(SMALL_KANA_BASE)
    return table


LABEL_TABLE = _build_label_table()
_LABEL_INDEX = {label: idx for idx, label in enumerate(GROUP_LABELS)}


@dataclass
class Group:
    label: str
    records: List[Any] = field(default_factory=list)


def label_for_key(key: str) -> str:
    """Return the section label for a canonical key."""
    if not key:
        return OTHER_LABEL
    first = key[0]
    label = LABEL_TABLE.get(first)
    if label:
        return label
    hira = normalize_kana(first)
    if hira != first:
        return label_for_key(hira)
    if first.isascii() and first.isalpha():
        return first.upper()
    return OTHER_LABEL


def group_label(
    record: SortableRecord, resolver: Optional[ReadingResolver] = None
) -> str:
    """Return the section label of ``record``.

    People are filed under their family name: without an explicit reading a
    "surname given" pair whose surname is in the dictionary is classified
    by the surname reading alone.
    """
    resolver = resolver or default_resolver()
    key = None
    if not (record.reading and record.reading.strip()):
        key = resolver.surname_reading(record.display_name)
    if not key:
        key = resolver.resolve(record.display_name, record.reading)
    return label_for_key(key)


def label_order(label: str) -> tuple:
    """Sort key for labels: kana sections first, then the rest by string."""
    idx = _LABEL_INDEX.get(label)
    if idx is not None:
        return (0, idx, "")
    return (1, 0, label)


def group_and_sort(
    records: Iterable[Any],
    key: Optional[Callable[[Any], SortableRecord]] = None,
    resolver: Optional[ReadingResolver] = None,
) -> List[Group]:
    """Partition ``records`` into labeled sections.

    Records keep their input order inside a section, so callers sort first.
    """
    resolver = resolver or default_resolver()
    buckets: Dict[str, List[Any]] = {}
    for item in records:
        rec = key(item) if key else item
        buckets.setdefault(group_label(rec, resolver), []).append(item)
    return [Group(label, buckets[label]) for label in sorted(buckets, key=label_order)]
