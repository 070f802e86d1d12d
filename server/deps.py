"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Header

from nodeflow.exceptions import AuthenticationRequired
from nodeflow.flow.executor import FlowExecutor
from nodeflow.providers.dispatcher import ProviderDispatcher
from server.stores import SqliteCredentialStore, SqliteProjectStore


def get_current_user(x_user_id: str | None = Header(default=None)) -> str:
    """id of the signed-in user, as forwarded by the identity provider."""
    if not x_user_id:
        raise AuthenticationRequired("Authentication required: missing X-User-Id header")
    return x_user_id


def get_dispatcher() -> ProviderDispatcher:
    return ProviderDispatcher()


def get_executor(dispatcher: ProviderDispatcher = Depends(get_dispatcher)) -> FlowExecutor:
    return FlowExecutor(
        dispatcher,
        projects=SqliteProjectStore(),
        credentials=SqliteCredentialStore(),
    )
