"""
Collaborator contracts supplied by the host application.

The struct layer never owns message data or performs I/O on its own. Every
lookup and side effect goes through one of the :class:`typing.Protocol`
classes below, so a Discord client, a test double, or a bridge into another
runtime all satisfy the same static contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Iterable, Protocol

RawRecord = Any


@dataclass(slots=True)
class ApiResponse:
    """Completed network request as seen by the struct layer."""

    status: int
    body: Any = field(default=None)


class Entity(Protocol):
    id: Any


class ChannelEntity(Protocol):
    id: Any
    guild: Any
    owner: Any
    messages: Iterable[Any]


class MessageStore(Protocol):
    def find_message(self, channel_id: Any, message_id: Any) -> RawRecord | None: ...

    def canonical_record(self, message_id: Any, revision_id: Any) -> RawRecord | None: ...


class EntityLookup(Protocol):
    def by_id(self, entity_id: Any) -> Any | None: ...


class Network(Protocol):
    def delete(self, endpoint: str) -> Awaitable[ApiResponse]: ...

    def patch(self, endpoint: str, body: dict) -> Awaitable[ApiResponse]: ...


class ContentParser(Protocol):
    def parse(self, record: RawRecord, raw_input: str) -> dict: ...


class MessageActions(Protocol):
    def jump_to_message(self, channel_id: Any, message_id: Any, flash: bool) -> None: ...

    def start_edit_message(self, channel_id: Any, message_id: Any, content: str | None) -> None: ...

    def end_edit_message(self) -> None: ...


class PermissionChecker(Protocol):
    def assert_permission(self, channel: Any, permission: str, flag: int) -> None:
        """Return silently when granted, raise ``InsufficientPermissions`` otherwise."""


__all__ = [
    "ApiResponse",
    "ChannelEntity",
    "ContentParser",
    "Entity",
    "EntityLookup",
    "MessageActions",
    "MessageStore",
    "Network",
    "PermissionChecker",
    "RawRecord",
]
