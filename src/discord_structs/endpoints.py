"""REST endpoint templates for message operations."""

from __future__ import annotations

from typing import Any

from .config import core


def messages_endpoint(channel_id: Any) -> str:
    """Return the messages collection path for ``channel_id``."""

    return core.MESSAGES_ENDPOINT.format(channel_id=channel_id)


def message_endpoint(channel_id: Any, message_id: Any) -> str:
    return f"{messages_endpoint(channel_id)}/{message_id}"


__all__ = ["messages_endpoint", "message_endpoint"]
