"""Parsing of storage identifiers taken from URLs and tokens."""

from __future__ import annotations

import uuid

from gosmooth.errors import BadRequestError


def try_parse_storage_id(value: str) -> uuid.UUID | None:
    """Return the UUID for ``value``, or None if it is not in storage-id format."""
    try:
        return uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None


def parse_storage_id(value: str, what: str) -> uuid.UUID:
    """Parse ``value`` as a storage id or raise a 400 naming ``what``."""
    parsed = try_parse_storage_id(value)
    if parsed is None:
        raise BadRequestError(f"invalid {what} ID")
    return parsed
