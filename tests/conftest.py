"""Shared pytest fixtures for confstats tests."""

import pytest

from confstats.core.classifier import Classifier, Rosters
from confstats.models.types import ParticipantRecord


def make_participant(
    name: str = "Some Participant",
    company: str | None = None,
    allergies: list[str] | None = None,
    t_shirt: dict | None = None,
    friday: bool = False,
    saturday: bool = False,
    notes: bool = False,
) -> ParticipantRecord:
    """Build a ParticipantRecord with sensible defaults."""
    return ParticipantRecord(
        name=name,
        company=company,
        allergies=allergies,
        t_shirt=t_shirt,
        when={"friday": friday, "saturday": saturday},
        i_can_take_notes_during_sessions=notes,
    )


@pytest.fixture
def participant():
    """Factory fixture for participant records."""
    return make_participant


@pytest.fixture
def small_classifier() -> Classifier:
    """Classifier with a two-person staff and one sponsor."""
    return Classifier(
        Rosters(
            organizers=frozenset({"Ada", "Grace"}),
            sponsor_keys=frozenset({"acme"}),
            non_food_allergies=frozenset({"", "n/a"}),
        )
    )
