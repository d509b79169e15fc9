"""Participant sources.

Sources load records and nothing else: no statistics, no report shaping.
"""

from confstats.providers.base import ParticipantLoadError, ParticipantSource
from confstats.providers.json_file import JsonFileParticipantSource
from confstats.providers.static import StaticParticipantSource

__all__ = [
    "JsonFileParticipantSource",
    "ParticipantLoadError",
    "ParticipantSource",
    "StaticParticipantSource",
]
