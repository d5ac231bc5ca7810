"""FastAPI dependency injection.

The preference store and neighborhood source live on app.state; create_app()
builds them once per application instance.
"""

from fastapi import Request

from neighborfit.data.base import NeighborhoodSource, PreferenceStore


def get_preference_store(request: Request) -> PreferenceStore:
    return request.app.state.preference_store


def get_neighborhood_source(request: Request) -> NeighborhoodSource:
    return request.app.state.neighborhood_source
