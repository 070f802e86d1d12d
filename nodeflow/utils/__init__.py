"""Utility functions for nodeflow."""

from nodeflow.utils.identifiers import (
    generate_project_id,
    utc_timestamp,
)

__all__ = [
    "generate_project_id",
    "utc_timestamp",
]
