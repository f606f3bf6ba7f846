"""Per-city sequential renaming of photo batches."""

from photo_classifier.core.classifier import PhotoClassifier, classify
from photo_classifier.core.errors import (
    ClassificationError,
    RecordStructureError,
    TimestampFormatError,
)

__all__ = [
    "ClassificationError",
    "PhotoClassifier",
    "RecordStructureError",
    "TimestampFormatError",
    "classify",
]
