"""
Struct façades over host message data.

Modules
=======

``identity``
    :class:`~discord_structs.structs.identity.IdentityCache`, the weak,
    identity-keyed record -> façade mapping each family owns.
``base``
    :class:`~discord_structs.structs.base.Struct` construction through the
    identity cache plus field/relational helpers shared by every façade.
``message``
    :class:`~discord_structs.structs.message.Message`, its type-selected
    variants and the mutating operations (delete, edit, jump, edit session).
``embed`` / ``reaction``
    Façades for records owned by a message.
``record``
    :class:`~discord_structs.structs.record.Record`, a weak-referenceable
    ``dict`` for hosts whose records are plain mappings.
"""

from .embed import Embed
from .identity import IdentityCache
from .message import (
    CallMessage,
    DefaultMessage,
    GroupChannelIconChangeMessage,
    GroupChannelNameChangeMessage,
    GuildMemberJoinMessage,
    Message,
    MessagePinnedMessage,
    RecipientAddMessage,
    RecipientRemoveMessage,
    register_variant,
)
from .reaction import Reaction
from .record import Record, to_record

__all__ = [
    "CallMessage",
    "DefaultMessage",
    "Embed",
    "GroupChannelIconChangeMessage",
    "GroupChannelNameChangeMessage",
    "GuildMemberJoinMessage",
    "IdentityCache",
    "Message",
    "MessagePinnedMessage",
    "Reaction",
    "RecipientAddMessage",
    "RecipientRemoveMessage",
    "Record",
    "register_variant",
    "to_record",
]
