"""FastAPI application factory.

API layer:
- Loads participants through the configured source
- Returns the stats report payload for the UI
- Forbidden: statistics logic, persistence
"""

from __future__ import annotations

import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from confstats.core.classifier import Classifier, load_rosters
from confstats.providers.base import ParticipantSource
from confstats.providers.json_file import JsonFileParticipantSource

# Default participants file when CONFSTATS_PARTICIPANTS_FILE is unset
DEFAULT_PARTICIPANTS_FILE = Path("data/participants.json")


def get_participant_source(request: Request) -> ParticipantSource:
    """Dependency returning the app's participant source."""
    return request.app.state.participant_source


def get_classifier(request: Request) -> Classifier:
    """Dependency returning the app's classifier."""
    return request.app.state.classifier


def _default_classifier() -> Classifier:
    rosters_file = os.environ.get("CONFSTATS_ROSTERS_FILE")
    if rosters_file:
        return Classifier(load_rosters(Path(rosters_file)))
    return Classifier()


def create_app(
    source: ParticipantSource | None = None,
    classifier: Classifier | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        source: Participant source. Defaults to a JSON file source reading
            CONFSTATS_PARTICIPANTS_FILE (or data/participants.json).
        classifier: Classifier. Defaults to rosters from
            CONFSTATS_ROSTERS_FILE, or the built-in rosters.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="confstats API",
        description="Conference participant statistics",
        version="0.1.0",
    )

    if source is None:
        participants_file = Path(
            os.environ.get("CONFSTATS_PARTICIPANTS_FILE", str(DEFAULT_PARTICIPANTS_FILE))
        )
        source = JsonFileParticipantSource(participants_file)
    if classifier is None:
        classifier = _default_classifier()

    app.state.participant_source = source
    app.state.classifier = classifier

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",  # Vite dev server
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from confstats.api.routes import stats

    app.include_router(stats.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
