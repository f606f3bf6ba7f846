"""Grouping of parsed entries into per-city ordered collections."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from photo_classifier.core.models import CityGroup, PhotoEntry


class GroupService:
    """Buckets entries by exact city text, keeping each bucket time-ordered."""

    def group(self, entries: Iterable[PhotoEntry]) -> dict[str, CityGroup]:
        """Return a mapping of city to its `CityGroup`.

        Entries are inserted one at a time, so `entries` may be a lazy stream.
        Equal timestamps keep arrival order.
        """
        groups: dict[str, CityGroup] = {}
        for entry in entries:
            group = groups.get(entry.city)
            if group is None:
                group = groups[entry.city] = CityGroup(city=entry.city)
            group.add(entry)

        logger.debug("Grouped entries into {} cities", len(groups))
        return groups


def group_by_city(entries: Iterable[PhotoEntry]) -> dict[str, CityGroup]:
    return GroupService().group(entries)
