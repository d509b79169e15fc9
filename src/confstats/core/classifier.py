"""Membership, sponsor and allergy classification.

A participant record carries no organizer or sponsor flag; both are
decided here against rosters bound at construction.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from confstats.core.normalizer import allergy_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rosters:
    """Named sets of strings driving classification.

    Attributes:
        organizers: Exact participant names of event staff.
        sponsor_keys: Canonical company keys of sponsors.
        non_food_allergies: Lowercase filler values that are not allergies.
    """

    organizers: frozenset[str]
    sponsor_keys: frozenset[str]
    non_food_allergies: frozenset[str]


DEFAULT_ROSTERS = Rosters(
    organizers=frozenset(
        {
            "Bernd",
            "Gustaf Graf",
            "Jörn Bernhardt",
            "Marco Emrich",
            "Philip Saa",
            "Robert Hostlowsky",
            "Wolfram Kriesing",
        }
    ),
    sponsor_keys=frozenset(
        {
            "codecentric",
            "compose-us",
            "hetzner-logo",
            "inovex-logo",
            "jambit",
            "lary-logo-white",
            "peerigon",
            "project-lary",
            "scalable-capital",
            "sepp-med",
            "tng",
            "typedigital",
        }
    ),
    non_food_allergies=frozenset({"", "none", "bullshit", "hard work"}),
)


def load_rosters(path: Path) -> Rosters:
    """Load rosters from a JSON file.

    The file holds an object with optional ``organizers``, ``sponsorKeys``
    and ``nonFoodAllergies`` lists. Missing lists fall back to
    DEFAULT_ROSTERS. Filler allergy values are lowercased and trimmed the
    same way allergy entries are before lookup.

    Args:
        path: Path to the JSON file.

    Returns:
        Rosters built from the file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON object of string lists.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Rosters file must contain a JSON object: {path}")

    def _names(field: str, default: frozenset[str]) -> frozenset[str]:
        values = data.get(field)
        if values is None:
            return default
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"Rosters field {field!r} must be a list of strings")
        return frozenset(values)

    rosters = Rosters(
        organizers=_names("organizers", DEFAULT_ROSTERS.organizers),
        sponsor_keys=_names("sponsorKeys", DEFAULT_ROSTERS.sponsor_keys),
        non_food_allergies=frozenset(
            allergy_key(v)
            for v in _names("nonFoodAllergies", DEFAULT_ROSTERS.non_food_allergies)
        ),
    )
    logger.info(
        f"Loaded rosters from {path}: {len(rosters.organizers)} organizers, "
        f"{len(rosters.sponsor_keys)} sponsors"
    )
    return rosters


class Classifier:
    """Pure predicates over names, company keys and allergy keys."""

    def __init__(self, rosters: Rosters = DEFAULT_ROSTERS):
        self.rosters = rosters

    @property
    def organizer_count(self) -> int:
        """Size of the organizer roster."""
        return len(self.rosters.organizers)

    def is_organizer(self, name: str) -> bool:
        """Exact, case-sensitive match against the organizer roster."""
        return name in self.rosters.organizers

    def is_sponsor_key(self, canonical_key: str) -> bool:
        """Match an already-canonicalized company key against sponsors."""
        return canonical_key in self.rosters.sponsor_keys

    def is_non_food_allergy(self, key: str) -> bool:
        """True for empty or filler allergy keys (lowercase, trimmed)."""
        return key == "" or key in self.rosters.non_food_allergies
