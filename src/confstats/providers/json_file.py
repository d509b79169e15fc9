"""JSON file participant source.

Reads a JSON array of participant objects (camelCase keys, as exported
by the registration form) and validates them into ParticipantRecord.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from confstats.models.types import ParticipantRecord
from confstats.providers.base import ParticipantLoadError, ParticipantSource

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[ParticipantRecord])


class JsonFileParticipantSource(ParticipantSource):
    """Source that reads all participants from one JSON file."""

    def __init__(self, path: Path):
        """Initialize JSON file source.

        Args:
            path: File containing a JSON array of participant objects.
        """
        self.path = Path(path)

    def load_all(self) -> list[ParticipantRecord]:
        """Read and validate the file.

        Returns:
            Records in file order.

        Raises:
            ParticipantLoadError: If the file is missing, unreadable, not
                JSON, or does not match the participant schema.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ParticipantLoadError(f"Cannot read participants file {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParticipantLoadError(f"Participants file {self.path} is not valid JSON: {e}") from e

        try:
            participants = _RECORDS.validate_python(data)
        except ValidationError as e:
            raise ParticipantLoadError(
                f"Participants file {self.path} does not match the participant schema: "
                f"{e.error_count()} errors"
            ) from e

        logger.debug(f"Loaded {len(participants)} participants from {self.path}")
        return participants
