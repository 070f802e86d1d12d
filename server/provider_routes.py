"""API route listing the supported providers and their models."""

from fastapi import APIRouter

from nodeflow.providers.catalog import PROVIDER_CATALOG, ProviderInfo

router = APIRouter()


@router.get("/providers")
def list_providers() -> list[ProviderInfo]:
    return list(PROVIDER_CATALOG.values())
