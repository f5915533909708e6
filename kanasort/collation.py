from __future__ import annotations
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, TypeVar

from .normalize import SMALL_KANA_BASE, normalize_kana
from .records import SortableRecord
from .resolver import ReadingResolver, default_resolver

T = TypeVar("T")

# gojuon order, each row followed by its voiced and semi-voiced variants
SYLLABLE_ORDER = [
    "あ", "い", "う", "え", "お",
    "か", "き", "く", "け", "こ", "が", "ぎ", "ぐ", "げ", "ご",
    "さ", "し", "す", "せ", "そ", "ざ", "じ", "ず", "ぜ", "ぞ",
    "た", "ち", "つ", "て", "と", "だ", "ぢ", "づ", "で", "ど",
    "な", "に", "ぬ", "ね", "の",
    "は", "ひ", "ふ", "へ", "ほ", "ば", "び", "ぶ", "べ", "ぼ",
    "ぱ", "ぴ", "ぷ", "ぺ", "ぽ",
    "ま", "み", "む", "め", "も",
    "や", "ゆ", "よ",
    "ら", "り", "る", "れ", "ろ",
    "わ", "ゐ", "ゑ", "を", "ん",
]

UNKNOWN_WEIGHT = 9999
MISSING_WEIGHT = -1

_WEIGHTS = {ch: idx for idx, ch in enumerate(SYLLABLE_ORDER)}
_WEIGHTS.update({small: _WEIGHTS[base] for small, base in SMALL_KANA_BASE.items()})


def kana_weight(ch: str) -> int:
    """Return the gojuon weight of a single character.

    A missing character (``""``) weighs less than everything; characters
    outside the syllable table weigh ``UNKNOWN_WEIGHT``.
    """
    if not ch:
        return MISSING_WEIGHT
    weight = _WEIGHTS.get(ch)
    if weight is None:
        weight = _WEIGHTS.get(normalize_kana(ch), UNKNOWN_WEIGHT)
    return weight


def compare_keys(key_a: str, key_b: str) -> int:
    """Three-way comparison of two canonical keys."""
    for i in range(max(len(key_a), len(key_b))):
        char_a = key_a[i] if i < len(key_a) else ""
        char_b = key_b[i] if i < len(key_b) else ""
        if char_a == char_b:
            continue
        weight_a = kana_weight(char_a)
        weight_b = kana_weight(char_b)
        if weight_a != weight_b:
            return weight_a - weight_b
        # same weight, different characters: fall back to code points
        return ord(char_a) - ord(char_b)
    return len(key_a) - len(key_b)


def compare_entries(
    a: SortableRecord,
    b: SortableRecord,
    resolver: Optional[ReadingResolver] = None,
) -> int:
    """Compare two records by their resolved readings."""
    resolver = resolver or default_resolver()
    key_a = resolver.resolve(a.display_name, a.reading)
    key_b = resolver.resolve(b.display_name, b.reading)
    return compare_keys(key_a, key_b)


def sort_records(
    records: Iterable[T],
    key: Optional[Callable[[T], SortableRecord]] = None,
    resolver: Optional[ReadingResolver] = None,
) -> List[T]:
    """Return ``records`` in gojuon order.

    ``key`` maps each record to a :class:`SortableRecord`; by default the
    records are taken to be sortable already. The sort is stable.
    """
    resolver = resolver or default_resolver()
    items = list(records)
    keys = []
    for item in items:
        rec = key(item) if key else item
        keys.append(resolver.resolve(rec.display_name, rec.reading))
    compare = cmp_to_key(compare_keys)
    order = sorted(range(len(items)), key=lambda idx: compare(keys[idx]))
    return [items[idx] for idx in order]
