import uuid

def new_id() -> str:
    """Return a new opaque identifier for a community or message."""
    return uuid.uuid4().hex
