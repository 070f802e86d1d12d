"""SQLite storage for per-user provider API keys."""

import sqlite3

from nodeflow.models.api_key import StoredApiKey
from server import settings


def _connect() -> sqlite3.Connection:
    settings.DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(settings.DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    with _connect() as conn:
        # one key per (user, provider)
        conn.execute(
            """
            create table if not exists api_keys (
                user_id text not null,
                provider text not null,
                key_json text not null,
                created_at text not null,
                updated_at text not null,
                primary key (user_id, provider)
            )
            """
        )
        conn.commit()


def upsert_key(key: StoredApiKey) -> None:
    """insert or replace a user's key for a provider."""
    with _connect() as conn:
        conn.execute(
            """
            insert into api_keys (user_id, provider, key_json, created_at, updated_at)
            values (?, ?, ?, ?, ?)
            on conflict(user_id, provider) do update set
                key_json = excluded.key_json,
                updated_at = excluded.updated_at
            """,
            (
                key.user_id,
                key.provider,
                key.model_dump_json(),
                key.created_at,
                key.updated_at,
            ),
        )
        conn.commit()


def get_key(user_id: str, provider: str) -> StoredApiKey | None:
    with _connect() as conn:
        row = conn.execute(
            "select key_json from api_keys where user_id = ? and provider = ?",
            (user_id, provider),
        ).fetchone()
    if not row:
        return None
    return StoredApiKey.model_validate_json(row["key_json"])


def list_keys(user_id: str) -> list[StoredApiKey]:
    with _connect() as conn:
        rows = conn.execute(
            "select key_json from api_keys where user_id = ? order by provider",
            (user_id,),
        ).fetchall()
    return [StoredApiKey.model_validate_json(row["key_json"]) for row in rows]


def delete_key(user_id: str, provider: str) -> None:
    with _connect() as conn:
        conn.execute(
            "delete from api_keys where user_id = ? and provider = ?",
            (user_id, provider),
        )
        conn.commit()
