"""API routes for the current user's provider keys."""

from fastapi import APIRouter, Depends

from nodeflow.exceptions import NotFound, UnsupportedProvider
from nodeflow.models.api_key import ApiKeySummary, ApiKeyUpsert, StoredApiKey
from nodeflow.providers.catalog import SUPPORTED_PROVIDERS
from nodeflow.utils.identifiers import utc_timestamp
from server.api_key_db import (
    delete_key as db_delete_key,
    get_key as db_get_key,
    list_keys as db_list_keys,
    upsert_key as db_upsert_key,
)
from server.deps import get_current_user

router = APIRouter()


@router.get("/api-keys")
def list_api_keys(user_id: str = Depends(get_current_user)) -> list[ApiKeySummary]:
    """list stored keys, masked."""
    return [key.summary() for key in db_list_keys(user_id)]


@router.put("/api-keys/{provider}")
def put_api_key(
    provider: str,
    request: ApiKeyUpsert,
    user_id: str = Depends(get_current_user),
) -> ApiKeySummary:
    """save the key for a provider, replacing any previous one."""
    if provider not in SUPPORTED_PROVIDERS:
        raise UnsupportedProvider(provider)

    now = utc_timestamp()
    existing = db_get_key(user_id, provider)
    key = StoredApiKey(
        user_id=user_id,
        provider=provider,
        api_key=request.api_key,
        created_at=existing.created_at if existing else now,
        updated_at=now,
    )
    db_upsert_key(key)
    return key.summary()


@router.delete("/api-keys/{provider}")
def delete_api_key(provider: str, user_id: str = Depends(get_current_user)) -> dict:
    if not db_get_key(user_id, provider):
        raise NotFound(f"API key not found for provider: {provider}")
    db_delete_key(user_id, provider)
    return {"deleted": provider}
