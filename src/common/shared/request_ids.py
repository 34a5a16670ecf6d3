"""Request id generation based on random (version 4) UUIDs."""

import uuid


def generate_request_id() -> str:
    """Return a random RFC 4122 UUID string."""
    return str(uuid.uuid4())


def generate_request_id_with_prefix(prefix: str) -> str:
    """Return a random UUID string, prefixed with ``<prefix>-`` when a prefix is given."""
    request_id = generate_request_id()
    if prefix:
        return f"{prefix}-{request_id}"
    return request_id
