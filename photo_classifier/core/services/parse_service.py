"""Parsing of raw photo batch text into `PhotoEntry` values.

Each record looks like `photo.jpg, Warsaw, 2013-09-05 14:08:15`. Arrival
sequence numbers are assigned per call, starting at 0.
"""

from __future__ import annotations

from datetime import datetime
import re

from loguru import logger

from photo_classifier.core.errors import RecordStructureError, TimestampFormatError
from photo_classifier.core.models import PhotoEntry

RECORD_DELIMITER = "\n"
FIELD_DELIMITER = ","
EXTENSION_DELIMITER = "."
FIELD_COUNT = 3

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
# strptime alone accepts single-digit fields, so the shape is checked first
_TIMESTAMP_RX = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)


def split_records(text: str | None) -> list[str]:
    """Split `text` into records, dropping empty records at the end only."""
    if not text:
        return []
    records = text.split(RECORD_DELIMITER)
    while records and records[-1] == "":
        records.pop()
    return records


def parse_timestamp(
    value: str, line_number: int | None = None, record: str | None = None
) -> datetime:
    """Parse a trimmed `yyyy-MM-dd HH:mm:ss` timestamp or raise `TimestampFormatError`."""
    text = value.strip()
    if not _TIMESTAMP_RX.fullmatch(text):
        raise TimestampFormatError(
            f"timestamp {text!r} does not match yyyy-MM-dd HH:mm:ss", line_number, record
        )
    try:
        return datetime.strptime(text, TIMESTAMP_FMT)
    except ValueError as ex:
        raise TimestampFormatError(f"invalid timestamp {text!r}: {ex}", line_number, record) from ex


def _split_filename(filename: str, line_number: int, record: str) -> tuple[str, str]:
    base, dot, extension = filename.rpartition(EXTENSION_DELIMITER)
    if not dot:
        raise RecordStructureError(f"filename {filename!r} has no extension", line_number, record)
    if not base or not extension:
        raise RecordStructureError(f"malformed filename {filename!r}", line_number, record)
    return base, extension


def _city_field(value: str) -> str:
    # Only the single space of the ", " separator is consumed; the rest is literal.
    return value[1:] if value.startswith(" ") else value


def parse_record(record: str, sequence: int) -> PhotoEntry:
    """Parse one record into a `PhotoEntry` with the given arrival `sequence`."""
    line_number = sequence + 1
    if not record:
        raise RecordStructureError("empty record", line_number, record)

    fields = record.split(FIELD_DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise RecordStructureError(
            f"expected {FIELD_COUNT} comma-separated fields, got {len(fields)}", line_number, record
        )
    filename, city_text, timestamp_text = fields

    base, extension = _split_filename(filename, line_number, record)
    city = _city_field(city_text)
    if not city:
        raise RecordStructureError("empty city", line_number, record)
    captured_at = parse_timestamp(timestamp_text, line_number, record)

    return PhotoEntry(
        original_name=base,
        extension=extension,
        city=city,
        captured_at=captured_at,
        arrival_sequence=sequence,
    )


def parse_records(text: str | None) -> list[PhotoEntry]:
    """Parse the whole batch; the first bad record aborts with an error."""
    entries = [parse_record(record, seq) for seq, record in enumerate(split_records(text))]
    logger.debug("Parsed {} photo records", len(entries))
    return entries
