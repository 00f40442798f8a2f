"""
Configuration for the community chat server and client.

Values are read from environment variables once, when this module is
imported. Set them before importing anything from ``communitychat``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Settings loaded from environment variables."""

    host: str = os.getenv("COMMUNITYCHAT_HOST", "127.0.0.1")
    port: int = int(os.getenv("COMMUNITYCHAT_PORT", "50051"))
    # Directory holding users.jsonl, communities.jsonl and directory.jsonl
    data_dir: str = os.getenv("COMMUNITYCHAT_DATA_DIR", os.path.join("communitychat", "data"))
    log_level: str = os.getenv("COMMUNITYCHAT_LOG_LEVEL", "INFO")


settings = Settings()

# Invocation metadata entry carrying the caller's opaque identity
CALLER_METADATA_KEY = "x-caller-identity"
