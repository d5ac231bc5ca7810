"""User preference routes.

Routes without a user id act on settings.default_user_id.
"""

from fastapi import APIRouter, Depends

from neighborfit.api.deps import get_preference_store
from neighborfit.api.schemas import (
    ApiResponse,
    DeleteResult,
    PreferencesUpdate,
    UserPreferencesSchema,
)
from neighborfit.config import settings
from neighborfit.data.base import PreferenceStore
from neighborfit.data.preferences import get_or_create_preferences, save_preferences

router = APIRouter(prefix="/api/preferences", tags=["preferences"])


def _read(store: PreferenceStore, user_id: str) -> ApiResponse[UserPreferencesSchema]:
    preferences = get_or_create_preferences(store, user_id)
    return ApiResponse[UserPreferencesSchema](
        success=True,
        data=UserPreferencesSchema.from_domain(preferences),
    )


def _write(store: PreferenceStore, user_id: str, req: PreferencesUpdate) -> ApiResponse[UserPreferencesSchema]:
    preferences = save_preferences(store, user_id, req.to_changes())
    return ApiResponse[UserPreferencesSchema](
        success=True,
        data=UserPreferencesSchema.from_domain(preferences),
        message="Preferences saved successfully",
    )


@router.get("", response_model=ApiResponse[UserPreferencesSchema])
async def get_current_preferences(store: PreferenceStore = Depends(get_preference_store)):
    return _read(store, settings.default_user_id)


@router.post("", response_model=ApiResponse[UserPreferencesSchema])
async def save_current_preferences(
    req: PreferencesUpdate,
    store: PreferenceStore = Depends(get_preference_store),
):
    return _write(store, settings.default_user_id, req)


@router.get("/{user_id}", response_model=ApiResponse[UserPreferencesSchema])
async def get_user_preferences(user_id: str, store: PreferenceStore = Depends(get_preference_store)):
    """Stored profile, or a freshly created default profile for a new user."""
    return _read(store, user_id)


@router.post("/{user_id}", response_model=ApiResponse[UserPreferencesSchema])
async def save_user_preferences(
    user_id: str,
    req: PreferencesUpdate,
    store: PreferenceStore = Depends(get_preference_store),
):
    """Merge a partial profile over what is stored."""
    return _write(store, user_id, req)


@router.delete("/{user_id}", response_model=ApiResponse[DeleteResult])
async def delete_user_preferences(user_id: str, store: PreferenceStore = Depends(get_preference_store)):
    deleted = store.delete(user_id)
    return ApiResponse[DeleteResult](
        success=True,
        data=DeleteResult(deleted=deleted),
        message="Preferences deleted successfully" if deleted else "No preferences found to delete",
    )
