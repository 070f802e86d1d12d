"""Pick the API key for a processing node."""

from nodeflow.exceptions import CredentialMissing
from nodeflow.flow.stores import CredentialStore
from nodeflow.models.flow_graph import AIProcessingNode


def resolve_api_key(
    processing_node: AIProcessingNode,
    user_id: str,
    provider: str,
    store: CredentialStore,
) -> str:
    """Inline node key first, then the user's stored key for ``provider``.

    Raises:
        CredentialMissing: neither source has a non-empty key.
    """
    inline_key = processing_node.data.api_key
    if inline_key:
        return inline_key

    stored_key = store.get_key(user_id, provider)
    if not stored_key:
        raise CredentialMissing(provider)
    return stored_key
