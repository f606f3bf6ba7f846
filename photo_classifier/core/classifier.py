"""Orchestration of the parse, group, name and emit stages."""

from __future__ import annotations

from loguru import logger

from photo_classifier.core.services.emit_service import emit
from photo_classifier.core.services.group_service import GroupService
from photo_classifier.core.services.naming_service import NamingService
from photo_classifier.core.services.parse_service import parse_records


class PhotoClassifier:
    """Renames a batch of photo records into `<city><id>.<ext>` names.

    The instance only holds its collaborators; every `classify` call builds
    its own entries, so calls are independent of each other.
    """

    def __init__(
        self,
        grouper: GroupService | None = None,
        namer: NamingService | None = None,
    ) -> None:
        self._grouper = grouper or GroupService()
        self._namer = namer or NamingService()

    def classify(self, text: str | None) -> str:
        """Return the renamed batch for `text`, or "" for empty input.

        Raises:
            ClassificationError: On the first malformed record or timestamp.
        """
        if not text:
            return ""
        entries = parse_records(text)
        groups = self._namer.assign(self._grouper.group(entries))
        result = emit(groups.values())
        logger.info("Classified {} photos across {} cities", len(entries), len(groups))
        return result


def classify(text: str | None) -> str:
    return PhotoClassifier().classify(text)
