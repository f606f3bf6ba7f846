"""Rendering of named entries back into input order."""

from __future__ import annotations

from collections.abc import Iterable

from photo_classifier.core.models import CityGroup, PhotoEntry
from photo_classifier.core.services.parse_service import EXTENSION_DELIMITER, RECORD_DELIMITER


def render_name(entry: PhotoEntry) -> str:
    """Final name of `entry`: city, id and extension with no separator before the id."""
    if entry.assigned_id is None:
        raise ValueError(f"entry #{entry.arrival_sequence} ({entry.filename}) has no assigned id")
    return f"{entry.city}{entry.assigned_id}{EXTENSION_DELIMITER}{entry.extension}"


def emit(groups: Iterable[CityGroup]) -> str:
    """Render all entries ordered by arrival sequence, one newline-terminated line each."""
    entries = sorted(
        (entry for group in groups for entry in group.items),
        key=lambda e: e.arrival_sequence,
    )
    return "".join(render_name(entry) + RECORD_DELIMITER for entry in entries)


def split_output(text: str) -> list[str]:
    """Split emitted text into names, dropping the empty segment after the last newline."""
    if not text:
        return []
    names = text.split(RECORD_DELIMITER)
    if names[-1] == "":
        names.pop()
    return names
