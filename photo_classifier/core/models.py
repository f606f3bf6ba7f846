"""Core domain models for parsed photo entries and city groups."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PhotoEntry:
    """A single photo record parsed from the input batch.

    `assigned_id` stays None until the naming stage produces a copy carrying it.
    """

    original_name: str
    extension: str
    city: str
    captured_at: datetime
    arrival_sequence: int
    assigned_id: str | None = None

    @property
    def filename(self) -> str:
        """Original filename as supplied, including the extension."""
        return f"{self.original_name}.{self.extension}"


def in_city_key(entry: PhotoEntry) -> tuple[datetime, int]:
    """Ordering key inside a city: capture time, then arrival order."""
    return (entry.captured_at, entry.arrival_sequence)


@dataclass
class CityGroup:
    """Entries sharing a city, kept sorted by `in_city_key`."""

    city: str
    items: list[PhotoEntry] = field(default_factory=list)

    def add(self, entry: PhotoEntry) -> None:
        """Insert `entry` at its sorted position."""
        bisect.insort(self.items, entry, key=in_city_key)

    def __len__(self) -> int:
        return len(self.items)
