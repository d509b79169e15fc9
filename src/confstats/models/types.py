"""Pydantic models for participant records and the stats report.

Wire names are camelCase (``tShirt``, ``orgaCount``); Python attributes
are snake_case. Both names are accepted on input.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ShirtType = Literal["fitted", "regular"]
TShirtSize = Literal["XS", "S", "M", "L", "XL", "XXL", "3XL"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TShirt(_CamelModel):
    """Requested t-shirt."""

    type: ShirtType
    size: TShirtSize


class Attendance(_CamelModel):
    """Days a participant attends. Both or neither may be set."""

    friday: bool
    saturday: bool


class ParticipantRecord(_CamelModel):
    """A registered participant as delivered by a participant source."""

    name: str
    company: str | None = None
    allergies: list[str] | None = None
    t_shirt: TShirt | None = None
    when: Attendance
    i_can_take_notes_during_sessions: bool = False


class CompanySummary(_CamelModel):
    """Participation count for one canonical company key."""

    canonical_key: str
    display_name: str
    amount: int
    is_sponsor: bool


class ShirtTally(_CamelModel):
    """T-shirt counts for one membership class.

    ``sizes`` is keyed by ``"<type>-<size>"``, e.g. ``"fitted-M"``.
    """

    count: int = 0
    fitted: int = 0
    regular: int = 0
    sizes: dict[str, int] = {}


class AttendanceStats(_CamelModel):
    """Headcounts by attendance day and notetaker availability."""

    friday_only: int = 0
    saturday_only: int = 0
    both_days: int = 0
    notetakers_friday: int = 0
    notetakers_saturday: int = 0


class StatsReport(_CamelModel):
    """Complete participant statistics."""

    allergies: dict[str, int]
    companies: list[CompanySummary]
    orga_count: int
    orga_shirts: ShirtTally
    participant_count: int
    participants_shirts: ShirtTally
    participants: AttendanceStats
