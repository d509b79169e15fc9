"""Participant stats API endpoint.

GET /api/participants/stats - Statistics over all registered participants
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from confstats.aggregation.summary import summarize_participants
from confstats.api.app import get_classifier, get_participant_source
from confstats.core.classifier import Classifier
from confstats.models.types import StatsReport
from confstats.providers.base import ParticipantLoadError, ParticipantSource

router = APIRouter()


@router.get(
    "/participants/stats",
    response_model=StatsReport,
    response_model_by_alias=True,
)
def get_participant_stats(
    source: ParticipantSource = Depends(get_participant_source),
    classifier: Classifier = Depends(get_classifier),
) -> StatsReport:
    """Get participant statistics.

    Args:
        source: Participant source (injected).
        classifier: Classifier (injected).

    Returns:
        StatsReport serialized with camelCase keys.

    Raises:
        HTTPException: 502 if participants cannot be loaded.
    """
    try:
        return summarize_participants(source, classifier)
    except ParticipantLoadError as e:
        raise HTTPException(status_code=502, detail="Loading of participants failed") from e
