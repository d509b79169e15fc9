"""Normalization of free-text registration fields.

- canonical_company_key: grouping key for company names
- allergy_key: tally key for allergy entries
"""

import re

# Legal-entity suffixes stripped from company names. "gmdbh" is a
# misspelling that shows up often enough in registrations to merit a slot.
LEGAL_SUFFIXES: tuple[str, ...] = ("ag", "gbr", "gmbh", "gmdbh")

_NON_LETTER = re.compile(r"[^a-z]")


def _suffix_pattern(legal_suffixes: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(s) for s in legal_suffixes)
    return re.compile(rf"\s+(?:{alternatives})\s*$")


_DEFAULT_SUFFIX = _suffix_pattern(LEGAL_SUFFIXES)


def canonical_company_key(
    name: str,
    legal_suffixes: tuple[str, ...] = LEGAL_SUFFIXES,
) -> str:
    """Compute the grouping key for a company name.

    Lowercases the name, drops one trailing legal-entity suffix token
    (``"Acme GmbH"`` -> ``"acme"``) and replaces every character outside
    ``a-z`` with a dash, one dash per character.

    Args:
        name: Company name as entered by the participant.
        legal_suffixes: Lowercase suffix tokens to strip.

    Returns:
        Canonical key, e.g. ``"scalable-capital"``.
    """
    if legal_suffixes == LEGAL_SUFFIXES:
        suffix = _DEFAULT_SUFFIX
    else:
        suffix = _suffix_pattern(legal_suffixes)

    key = name.lower()
    if legal_suffixes:
        key = suffix.sub("", key, count=1)
    return _NON_LETTER.sub("-", key)


def allergy_key(allergy: str) -> str:
    """Tally key for an allergy entry: lowercased and trimmed."""
    return allergy.lower().strip()
