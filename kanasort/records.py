from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, List, NamedTuple, Optional


class SortableRecord(NamedTuple):
    """A display string plus its optional kana reading."""

    display_name: str
    reading: Optional[str] = None


# field name -> (display attribute, reading attribute)
FIELDS = {
    "name": ("name", "name_reading"),
    "company": ("company", "company_reading"),
}

# camelCase keys used by the mobile app's stored JSON
_CAMEL_KEYS = {
    "nameReading": "name_reading",
    "companyReading": "company_reading",
    "postalCode": "postal_code",
}


@dataclass
class BusinessCard:
    id: str = ""
    name: str = ""
    name_reading: Optional[str] = None
    company: str = ""
    company_reading: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None
    memo: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BusinessCard":
        """Build a card from snake_case or app-style camelCase keys.

        Unknown keys (image URIs, timestamps...) are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            key = _CAMEL_KEYS.get(key, key)
            if key in known:
                kwargs[key] = value
        return cls(**kwargs)


def get_value(record: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute object."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def as_sortable(record: Any, field_name: str = "name") -> SortableRecord:
    """Return the ``(display, reading)`` pair of ``record`` for ``field_name``.

    Raises:
        ValueError: If ``field_name`` is not ``"name"`` or ``"company"``.
    """
    try:
        display_attr, reading_attr = FIELDS[field_name]
    except KeyError:
        raise ValueError(f"Unsupported sort field: {field_name}") from None
    display = get_value(record, display_attr)
    reading = get_value(record, reading_attr)
    if not isinstance(reading, str) or not reading:
        reading = None
    return SortableRecord("" if display is None else str(display), reading)
