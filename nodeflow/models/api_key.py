"""Per-user provider API keys.

A user keeps at most one key per provider; the stored secret is never sent
back in full, only a masked preview.
"""

from pydantic import BaseModel, Field


def mask_api_key(api_key: str) -> str:
    """Keep the first 3 and last 4 characters of a key."""
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:3]}...{api_key[-4:]}"


class StoredApiKey(BaseModel):
    model_config = {"extra": "forbid"}

    user_id: str
    provider: str  # "openai", "anthropic", "google"
    api_key: str = Field(repr=False)

    created_at: str
    updated_at: str

    def summary(self) -> "ApiKeySummary":
        return ApiKeySummary(
            provider=self.provider,
            key_preview=mask_api_key(self.api_key),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class ApiKeySummary(BaseModel):
    """What the API returns when listing keys."""

    provider: str
    key_preview: str
    created_at: str
    updated_at: str


class ApiKeyUpsert(BaseModel):
    """Request model for saving a provider key."""

    model_config = {"populate_by_name": True}

    api_key: str = Field(min_length=1, alias="apiKey")
