"""Per-city sequential id assignment.

Ids run from 1 to N inside each city and are left-padded with zeros to the
digit count of N. Widths are computed per city, never shared.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from photo_classifier.core.models import CityGroup


def id_width(count: int) -> int:
    """Number of decimal digits needed for ids `1..count`."""
    if count < 1:
        raise ValueError(f"group size must be positive, got {count}")
    return len(str(count))


def format_id(position: int, width: int) -> str:
    return f"{position:0{width}d}"


class NamingService:
    """Assigns zero-padded positional ids inside each city group."""

    def name_group(self, group: CityGroup) -> CityGroup:
        """Return a copy of `group` whose entries carry their `assigned_id`."""
        width = id_width(len(group.items))
        named = [
            replace(entry, assigned_id=format_id(position, width))
            for position, entry in enumerate(group.items, start=1)
        ]
        logger.debug("City {!r}: {} photos, id width {}", group.city, len(named), width)
        return CityGroup(city=group.city, items=named)

    def assign(self, groups: dict[str, CityGroup]) -> dict[str, CityGroup]:
        return {city: self.name_group(group) for city, group in groups.items()}


def assign_ids(groups: dict[str, CityGroup]) -> dict[str, CityGroup]:
    return NamingService().assign(groups)
