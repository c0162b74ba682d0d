"""Typed, identity-preserving façades over live Discord message records."""

from .errors import (
    AuthorizationError,
    HostNotInstalled,
    InsufficientPermissions,
    StructError,
    UnsupportedOperationError,
)
from .host import HostApi, get_host, install, uninstall
from .ports import ApiResponse
from .structs import (
    CallMessage,
    DefaultMessage,
    Embed,
    GroupChannelIconChangeMessage,
    GroupChannelNameChangeMessage,
    GuildMemberJoinMessage,
    Message,
    MessagePinnedMessage,
    Reaction,
    RecipientAddMessage,
    RecipientRemoveMessage,
    Record,
    to_record,
)

__all__ = [
    "ApiResponse",
    "AuthorizationError",
    "CallMessage",
    "DefaultMessage",
    "Embed",
    "GroupChannelIconChangeMessage",
    "GroupChannelNameChangeMessage",
    "GuildMemberJoinMessage",
    "HostApi",
    "HostNotInstalled",
    "InsufficientPermissions",
    "Message",
    "MessagePinnedMessage",
    "Reaction",
    "RecipientAddMessage",
    "RecipientRemoveMessage",
    "Record",
    "StructError",
    "UnsupportedOperationError",
    "get_host",
    "install",
    "to_record",
    "uninstall",
]
