"""Base participant source interface.

A source has one job: ``load_all() -> list[ParticipantRecord]``.
Sources must NOT:
- Compute statistics
- Shape report output
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from confstats.models.types import ParticipantRecord


class ParticipantLoadError(Exception):
    """Raised by a source when participant records cannot be loaded."""


class ParticipantSource(ABC):
    """Abstract base class for participant sources."""

    @abstractmethod
    def load_all(self) -> list[ParticipantRecord]:
        """Load every participant record, in registration order.

        Returns:
            Fully materialized list of records.

        Raises:
            ParticipantLoadError: If the records cannot be loaded.
        """
        pass
