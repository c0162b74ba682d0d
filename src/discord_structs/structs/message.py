"""
Message façades.

:meth:`Message.from_record` picks the variant class from the record's ``type``
discriminant (the integer values of :class:`discord.MessageType`) and wraps
the record through the shared message :class:`IdentityCache`. Every variant
shares that cache, so a record has at most one message façade regardless of
which class was asked to wrap it.

Variant table::

    0 DefaultMessage                  4 GroupChannelNameChangeMessage
    1 RecipientAddMessage             5 GroupChannelIconChangeMessage
    2 RecipientRemoveMessage          6 MessagePinnedMessage
    3 CallMessage                     7 GuildMemberJoinMessage
    * Message (generic fallback)

Getters read the live record on every access. ``delete``/``edit`` and the
edit-session helpers validate the acting user synchronously and only then
reach the host's network or UI collaborators.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Awaitable, ClassVar, Dict, List, Type

import discord

from ..config import core
from ..endpoints import message_endpoint
from ..errors import AuthorizationError, InsufficientPermissions, UnsupportedOperationError
from ..host import HostApi, get_host
from ..ports import ApiResponse
from .base import Struct, field, find_by_id, resolve_all, same_user
from .embed import Embed
from .identity import IdentityCache
from .reaction import Reaction

logger = logging.getLogger(__name__)

MANAGE_MESSAGES = "MANAGE_MESSAGES"
MANAGE_MESSAGES_FLAG = discord.Permissions(manage_messages=True).value

DELETABLE_TYPES = ("DEFAULT", "CHANNEL_PINNED_MESSAGE", "GUILD_MEMBER_JOIN")

# ------------------------------------------------------------------ #
# 1.  Variant registry
# ------------------------------------------------------------------ #

_VARIANTS: Dict[int, Type["Message"]] = {}


def register_variant(message_type: discord.MessageType):
    """Class decorator binding a :class:`Message` subclass to ``message_type``."""

    def decorator(cls: Type["Message"]) -> Type["Message"]:
        if not issubclass(cls, Message):
            raise TypeError("register_variant expects a Message subclass")
        value = message_type.value
        if value in _VARIANTS:
            raise ValueError(f"Message type {value} already registered to {_VARIANTS[value].__name__}")
        cls.message_type = message_type
        _VARIANTS[value] = cls
        return cls

    return decorator


def variant_for(discriminant: Any) -> Type["Message"]:
    """Return the variant class for ``discriminant``; unknown shapes get :class:`Message`."""

    # bool is an int subclass; True must not select RecipientAddMessage.
    if isinstance(discriminant, bool) or not isinstance(discriminant, int):
        return Message
    return _VARIANTS.get(discriminant, Message)


def registered_variants() -> Dict[int, Type["Message"]]:
    return dict(_VARIANTS)


# ------------------------------------------------------------------ #
# 2.  Base message
# ------------------------------------------------------------------ #


class Message(Struct):
    """Generic message; also the fallback for unrecognised types."""

    _cache = IdentityCache("message")

    TYPE: ClassVar[str | None] = None
    message_type: ClassVar[discord.MessageType | None] = None

    @classmethod
    def from_record(cls, record: Any) -> "Message":
        """Wrap ``record`` in the variant selected by its ``type`` field."""

        return variant_for(field(record, "type"))(record)

    @classmethod
    def from_id(cls, channel_id: Any, message_id: Any) -> "Message | None":
        record = get_host().store.find_message(channel_id, message_id)
        if record is None:
            return None
        return cls.from_record(record)

    @property
    def id(self) -> Any:
        return self._get("id")

    @property
    def channel_id(self) -> Any:
        return self._get("channel_id")

    @property
    def nonce(self) -> Any:
        return self._get("nonce")

    @property
    def type(self) -> Any:
        """Rendered type name, or the raw discriminant for generic messages."""

        if self.TYPE is not None:
            return self.TYPE
        return self._get("type")

    @property
    def timestamp(self) -> Any:
        return self._get("timestamp")

    @property
    def state(self) -> Any:
        return self._get("state")

    @property
    def nick(self) -> str | None:
        return self._get("nick")

    @property
    def colour_string(self) -> str | None:
        return self._get("color_string")

    @property
    def webhook_id(self) -> Any:
        return self._get("webhook_id")

    @property
    def created_at(self) -> datetime | None:
        """Creation time decoded from the snowflake id."""

        try:
            return discord.utils.snowflake_time(int(self.id))
        except (TypeError, ValueError, OverflowError):
            return None

    @property
    def author_id(self) -> Any:
        """Author id from the record; ``None`` for webhook messages."""

        if self.webhook_id:
            return None
        return field(self._get("author"), "id")

    @property
    def author(self) -> Any | None:
        """Resolved author, or ``None`` for webhook messages and missing authors."""

        author_id = self.author_id
        if author_id is None:
            return None
        return get_host().users.by_id(author_id)

    def is_authored_by(self, user: Any) -> bool:
        """Compare the record's author id with ``user.id``; the user lookup is not consulted."""

        author_id = self.author_id
        return author_id is not None and author_id == field(user, "id")

    @property
    def is_deletable(self) -> bool:
        return self.type in DELETABLE_TYPES

    def delete(self) -> Awaitable[ApiResponse]:
        """
        Request deletion of this message.

        Allowed for the author, for users holding ``MANAGE_MESSAGES`` in the
        channel, and for the channel owner. Checks run before the request is
        issued; the returned awaitable is the network collaborator's.
        """

        if not self.is_deletable:
            raise UnsupportedOperationError(f"Message type {self.type} is not deletable.")

        host = get_host()
        acting = host.current_user()
        if not self.is_authored_by(acting):
            self._assert_can_manage(host, acting)

        logger.info("Deleting message %s in channel %s", self.id, self.channel_id)
        return host.network.delete(message_endpoint(self.channel_id, self.id))

    def _assert_can_manage(self, host: HostApi, acting: Any) -> None:
        channel = self.channel
        if channel is None:
            raise InsufficientPermissions(
                MANAGE_MESSAGES, f"Channel {self.channel_id} is unavailable; cannot verify {MANAGE_MESSAGES}."
            )
        try:
            host.permissions.assert_permission(channel, MANAGE_MESSAGES, MANAGE_MESSAGES_FLAG)
        except InsufficientPermissions:
            if same_user(field(channel, "owner"), acting):
                return
            raise

    def jump_to(self, flash: bool | None = None) -> None:
        """Scroll the host UI to this message."""

        if flash is None:
            flash = core.JUMP_FLASH
        get_host().actions.jump_to_message(self.channel_id, self.id, flash)

    def _assert_author(self, host: HostApi, message: str) -> None:
        if not self.is_authored_by(host.current_user()):
            raise AuthorizationError(message)


# ------------------------------------------------------------------ #
# 3.  Variants
# ------------------------------------------------------------------ #


@register_variant(discord.MessageType.default)
class DefaultMessage(Message):
    """Regular user message."""

    TYPE = "DEFAULT"

    @property
    def content(self) -> str | None:
        return self._get("content")

    @property
    def content_parsed(self) -> Any:
        return self._get("content_parsed")

    @property
    def invite_codes(self) -> Any:
        return self._get("invites")

    @property
    def attachments(self) -> Any:
        return self._get("attachments")

    @property
    def mention_ids(self) -> Any:
        return self._get("mentions")

    @property
    def mention_role_ids(self) -> Any:
        return self._get("mention_roles")

    @property
    def mention_everyone(self) -> bool | None:
        return self._get("mention_everyone")

    @property
    def edited_timestamp(self) -> Any:
        return self._get("edited_timestamp")

    @property
    def edited(self) -> bool:
        return bool(self.edited_timestamp)

    @property
    def tts(self) -> bool | None:
        return self._get("tts")

    @property
    def mentioned(self) -> bool | None:
        return self._get("mentioned")

    @property
    def bot(self) -> bool | None:
        return self._get("bot")

    @property
    def blocked(self) -> bool | None:
        return self._get("blocked")

    @property
    def pinned(self) -> bool | None:
        return self._get("pinned")

    @property
    def activity(self) -> Any:
        return self._get("activity")

    @property
    def application(self) -> Any:
        return self._get("application")

    @property
    def webhook(self) -> Any | None:
        """Raw webhook author for webhook messages."""

        return self._get("author") if self.webhook_id else None

    @property
    def mentions(self) -> List[Any]:
        return resolve_all(self.mention_ids, get_host().users.by_id)

    @property
    def mention_roles(self) -> List[Any]:
        guild = self.guild
        roles = field(guild, "roles") if guild is not None else None
        return resolve_all(self.mention_role_ids, lambda role_id: find_by_id(roles, role_id))

    @property
    def embeds(self) -> List[Embed]:
        return [Embed(raw, self.id, self.channel_id) for raw in self._get("embeds") or ()]

    @property
    def reactions(self) -> List[Reaction]:
        return [Reaction(raw, self.id, self.channel_id) for raw in self._get("reactions") or ()]

    def edit(self, content: str, parse: bool = False) -> Awaitable["DefaultMessage"]:
        """
        Replace the message content.

        Only the author may edit. With ``parse`` the host parser turns
        ``content`` into the request body; otherwise it is sent verbatim.
        The returned awaitable resolves to this façade, rebound to the store's
        canonical record for the edited message.
        """

        host = get_host()
        self._assert_author(host, "Cannot edit messages sent by other users.")
        body = host.parser.parse(self._record, content) if parse else {"content": content}
        return self._commit_edit(host, body)

    async def _commit_edit(self, host: HostApi, body: dict) -> "DefaultMessage":
        message_id = self.id
        logger.info("Editing message %s in channel %s", message_id, self.channel_id)
        response = await host.network.patch(message_endpoint(self.channel_id, message_id), body)

        revision_id = field(field(response, "body"), "id", message_id)
        record = host.store.canonical_record(message_id, revision_id)
        if record is None:
            logger.warning(
                "Store returned no record for edited message %s (revision %s); keeping current binding.",
                message_id,
                revision_id,
            )
            return self
        self.rebind(record)
        return self

    def rebind(self, record: Any) -> None:
        """
        Bind this façade to ``record`` and register it under that record.

        The previous record keeps its cache entry, so stale references still
        resolve to this façade until the host drops them.
        """

        if record is self._record:
            return
        # A record the cache rejects leaves the binding untouched.
        self._cache.register(record, self)
        self._record = record
        logger.debug("Rebound message %s to a new record", self.id)

    def start_edit(self, content: str | None = None) -> None:
        """Open the host's edit UI, seeded with ``content`` or the current content."""

        host = get_host()
        self._assert_author(host, "Cannot edit messages sent by other users.")
        host.actions.start_edit_message(self.channel_id, self.id, content or self.content)

    def end_edit(self) -> None:
        host = get_host()
        self._assert_author(host, "Cannot edit messages sent by other users.")
        host.actions.end_edit_message()


@register_variant(discord.MessageType.recipient_add)
class RecipientAddMessage(Message):
    TYPE = "RECIPIENT_ADD"

    @property
    def added_user_id(self) -> Any:
        return _first(self._get("mentions"))

    @property
    def added_user(self) -> Any | None:
        return _user_by_id(self.added_user_id)


@register_variant(discord.MessageType.recipient_remove)
class RecipientRemoveMessage(Message):
    TYPE = "RECIPIENT_REMOVE"

    @property
    def removed_user_id(self) -> Any:
        return _first(self._get("mentions"))

    @property
    def removed_user(self) -> Any | None:
        return _user_by_id(self.removed_user_id)

    @property
    def user_left(self) -> bool:
        """True when the removed user removed themselves."""

        removed_id = self.removed_user_id
        return removed_id is not None and removed_id == self.author_id


@register_variant(discord.MessageType.call)
class CallMessage(Message):
    TYPE = "CALL"

    @property
    def mention_ids(self) -> Any:
        return self._get("mentions")

    @property
    def call(self) -> Any:
        return self._get("call")

    @property
    def ended_timestamp(self) -> Any:
        return field(self.call, "ended_timestamp")

    @property
    def mentions(self) -> List[Any]:
        return resolve_all(self.mention_ids, get_host().users.by_id)

    @property
    def participants(self) -> List[Any]:
        return resolve_all(field(self.call, "participants"), get_host().users.by_id)


@register_variant(discord.MessageType.channel_name_change)
class GroupChannelNameChangeMessage(Message):
    TYPE = "CHANNEL_NAME_CHANGE"

    @property
    def new_name(self) -> str | None:
        return self._get("content")


@register_variant(discord.MessageType.channel_icon_change)
class GroupChannelIconChangeMessage(Message):
    TYPE = "CHANNEL_ICON_CHANGE"


@register_variant(discord.MessageType.pins_add)
class MessagePinnedMessage(Message):
    TYPE = "CHANNEL_PINNED_MESSAGE"


@register_variant(discord.MessageType.new_member)
class GuildMemberJoinMessage(Message):
    TYPE = "GUILD_MEMBER_JOIN"


def _first(items: Any) -> Any:
    try:
        return items[0] if items else None
    except (TypeError, KeyError):
        return None


def _user_by_id(user_id: Any) -> Any | None:
    if user_id is None:
        return None
    return get_host().users.by_id(user_id)


__all__ = [
    "DELETABLE_TYPES",
    "MANAGE_MESSAGES",
    "MANAGE_MESSAGES_FLAG",
    "Message",
    "DefaultMessage",
    "RecipientAddMessage",
    "RecipientRemoveMessage",
    "CallMessage",
    "GroupChannelNameChangeMessage",
    "GroupChannelIconChangeMessage",
    "MessagePinnedMessage",
    "GuildMemberJoinMessage",
    "register_variant",
    "registered_variants",
    "variant_for",
]
