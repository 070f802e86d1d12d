"""ID generation and timestamp utilities."""

import uuid
from datetime import datetime, timezone


def generate_project_id() -> str:
    """Generate a unique project ID (UUID4)."""
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()
