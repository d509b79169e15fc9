"""In-memory participant source.

Serves a fixed list of records. Used for tests and for embedding the
aggregation in code that already holds the participants.
"""

from __future__ import annotations

from collections.abc import Iterable

from confstats.models.types import ParticipantRecord
from confstats.providers.base import ParticipantSource


class StaticParticipantSource(ParticipantSource):
    """Source backed by a list held in memory."""

    def __init__(self, participants: Iterable[ParticipantRecord] = ()):
        self._participants = list(participants)

    def load_all(self) -> list[ParticipantRecord]:
        # Copy so callers cannot mutate the source's list
        return list(self._participants)
