"""Protocol definitions for the collaborators around the scoring engine.

The engine only ever receives finished records; these interfaces describe
where the API layer gets them from.
"""

from typing import Protocol, runtime_checkable

from neighborfit.models.neighborhood import Location, Neighborhood
from neighborfit.models.preferences import UserPreferences


@runtime_checkable
class NeighborhoodSource(Protocol):
    def get_neighborhood(self, location: Location) -> Neighborhood:
        """Return the neighborhood record centred on a location."""
        ...

    def find_neighborhoods(
        self,
        center: Location,
        radius_miles: float,
        min_count: int = 3,
        max_count: int = 10,
    ) -> list[Neighborhood]:
        """Return between min_count and max_count neighborhoods around a point."""
        ...


@runtime_checkable
class PreferenceStore(Protocol):
    def get(self, user_id: str) -> UserPreferences | None:
        ...

    def put(self, preferences: UserPreferences) -> None:
        ...

    def delete(self, user_id: str) -> bool:
        """Remove a profile. Returns False if there was nothing to remove."""
        ...

    def user_ids(self) -> list[str]:
        ...

    def clear(self) -> None:
        ...
