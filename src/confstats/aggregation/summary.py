"""Participant statistics aggregation.

Folds the participant list into allergy, company, shirt and attendance
tallies. Domain logic is pure - loading goes through a ParticipantSource.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from confstats.core.classifier import Classifier
from confstats.core.normalizer import allergy_key, canonical_company_key
from confstats.models.domain import (
    EMPTY_COMPANY_KEY,
    AttendanceCounter,
    CompanyEntry,
    ShirtCounter,
    empty_company_entry,
)
from confstats.models.types import ParticipantRecord, StatsReport
from confstats.providers.base import ParticipantSource

logger = logging.getLogger(__name__)


def summarize_participants(
    source: ParticipantSource,
    classifier: Classifier | None = None,
) -> StatsReport:
    """Load all participants and compute their statistics.

    Load failures are logged and re-raised unchanged; no partial report
    is produced.

    Args:
        source: Participant source to load from.
        classifier: Classifier to use. Defaults to the built-in rosters.

    Returns:
        StatsReport for every loaded participant.

    Raises:
        ParticipantLoadError: If the source fails to load.
    """
    try:
        participants = source.load_all()
    except Exception as e:
        logger.error(f"Loading of participants failed: {e}", exc_info=True)
        raise

    report = compute_stats(participants, classifier)
    logger.info(
        f"Summarized {report.participant_count} participants "
        f"from {len(report.companies)} companies"
    )
    return report


def compute_stats(
    participants: Sequence[ParticipantRecord],
    classifier: Classifier | None = None,
) -> StatsReport:
    """Compute statistics for a list of participants.

    Pure function - single left-to-right pass, no I/O.

    Args:
        participants: Records in registration order.
        classifier: Classifier to use. Defaults to the built-in rosters.

    Returns:
        StatsReport with companies sorted by canonical key.
    """
    if classifier is None:
        classifier = Classifier()

    allergies: dict[str, int] = {}
    orga_shirts = ShirtCounter()
    participants_shirts = ShirtCounter()
    attendance = AttendanceCounter()
    companies: dict[str, CompanyEntry] = {EMPTY_COMPANY_KEY: empty_company_entry()}

    for participant in participants:
        if classifier.is_organizer(participant.name):
            shirts = orga_shirts
        else:
            shirts = participants_shirts

        if participant.company:
            key = canonical_company_key(participant.company)
            if key not in companies:
                # First spelling seen becomes the display name
                companies[key] = CompanyEntry(
                    canonical_key=key,
                    display_name=participant.company,
                    is_sponsor=classifier.is_sponsor_key(key),
                )
            companies[key].amount += 1
        else:
            companies[EMPTY_COMPANY_KEY].amount += 1

        # Repeats within one participant's list are counted per occurrence
        for allergy in participant.allergies or []:
            key = allergy_key(allergy)
            if not classifier.is_non_food_allergy(key):
                allergies[key] = allergies.get(key, 0) + 1

        if participant.t_shirt is not None:
            shirts.add(participant.t_shirt)

        attendance.add(participant.when, participant.i_can_take_notes_during_sessions)

    # Plain str ordering is ordinal (code point) comparison
    sorted_companies = [companies[key].to_summary() for key in sorted(companies)]

    return StatsReport(
        allergies=allergies,
        companies=sorted_companies,
        orga_count=classifier.organizer_count,
        orga_shirts=orga_shirts.to_tally(),
        participant_count=len(participants),
        participants_shirts=participants_shirts.to_tally(),
        participants=attendance.to_stats(),
    )
