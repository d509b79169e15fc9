"""Domain accumulators for a single aggregation run.

Plain mutable dataclasses owned by one ``compute_stats`` call. They are
converted to the frozen pydantic models in ``confstats.models.types``
once the fold is complete.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from confstats.models.types import (
    Attendance,
    AttendanceStats,
    CompanySummary,
    ShirtTally,
    TShirt,
)

EMPTY_COMPANY_KEY = "__empty"
EMPTY_COMPANY_NAME = "(no company)"


def shirt_size_key(shirt: TShirt) -> str:
    """Composite ``sizes`` key for a shirt, e.g. ``"regular-XL"``."""
    return f"{shirt.type}-{shirt.size}"


# ============================================================================
# Company Domain
# ============================================================================


@dataclass
class CompanyEntry:
    """Running count for one canonical company key.

    ``display_name`` and ``is_sponsor`` are fixed when the entry is
    created; only ``amount`` changes afterwards.
    """

    canonical_key: str
    display_name: str
    is_sponsor: bool
    amount: int = 0

    def to_summary(self) -> CompanySummary:
        return CompanySummary(
            canonical_key=self.canonical_key,
            display_name=self.display_name,
            amount=self.amount,
            is_sponsor=self.is_sponsor,
        )


def empty_company_entry() -> CompanyEntry:
    """Sentinel entry collecting participants without a company."""
    return CompanyEntry(
        canonical_key=EMPTY_COMPANY_KEY,
        display_name=EMPTY_COMPANY_NAME,
        is_sponsor=False,
    )


# ============================================================================
# Shirt Domain
# ============================================================================


@dataclass
class ShirtCounter:
    """Mutable shirt tally for one membership class."""

    count: int = 0
    fitted: int = 0
    regular: int = 0
    sizes: dict[str, int] = field(default_factory=dict)

    def add(self, shirt: TShirt) -> None:
        self.count += 1
        if shirt.type == "fitted":
            self.fitted += 1
        else:
            self.regular += 1
        key = shirt_size_key(shirt)
        self.sizes[key] = self.sizes.get(key, 0) + 1

    def to_tally(self) -> ShirtTally:
        return ShirtTally(
            count=self.count,
            fitted=self.fitted,
            regular=self.regular,
            sizes=dict(self.sizes),
        )


# ============================================================================
# Attendance Domain
# ============================================================================


@dataclass
class AttendanceCounter:
    """Mutable attendance and notetaker counters."""

    friday_only: int = 0
    saturday_only: int = 0
    both_days: int = 0
    notetakers_friday: int = 0
    notetakers_saturday: int = 0

    def add(self, when: Attendance, takes_notes: bool) -> None:
        # At most one of the three day counters moves per participant
        if when.friday and when.saturday:
            self.both_days += 1
        elif when.friday:
            self.friday_only += 1
        elif when.saturday:
            self.saturday_only += 1

        if takes_notes and when.friday:
            self.notetakers_friday += 1
        if takes_notes and when.saturday:
            self.notetakers_saturday += 1

    def to_stats(self) -> AttendanceStats:
        return AttendanceStats(
            friday_only=self.friday_only,
            saturday_only=self.saturday_only,
            both_days=self.both_days,
            notetakers_friday=self.notetakers_friday,
            notetakers_saturday=self.notetakers_saturday,
        )
