"""Errors raised while classifying a photo batch.

Any of these aborts the whole batch; callers never receive partial output.
"""

from __future__ import annotations


class ClassificationError(ValueError):
    """Base error for a batch that cannot be classified.

    Attributes:
        line_number: 1-based input line of the offending record, if known.
        record: Raw text of the offending record, if known.
    """

    def __init__(
        self, message: str, line_number: int | None = None, record: str | None = None
    ) -> None:
        super().__init__(message, line_number, record)
        self.reason = message
        self.line_number = line_number
        self.record = record

    def __str__(self) -> str:
        if self.line_number is None:
            return self.reason
        return f"line {self.line_number}: {self.reason} | record={self.record!r}"


class RecordStructureError(ClassificationError):
    """A record is missing fields, has extra fields, or has a malformed filename."""


class TimestampFormatError(ClassificationError):
    """A timestamp does not match `yyyy-MM-dd HH:mm:ss`."""
