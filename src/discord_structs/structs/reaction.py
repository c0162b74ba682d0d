"""Reaction façade."""

from __future__ import annotations

from typing import Any

from .base import ChildStruct, field, find_by_id
from .identity import IdentityCache


class Reaction(ChildStruct):
    """Emoji reaction on a message."""

    _cache = IdentityCache("reaction")

    @property
    def count(self) -> int | None:
        return self._get("count")

    @property
    def me(self) -> bool | None:
        return self._get("me")

    @property
    def emoji(self) -> Any | None:
        """
        Unicode emoji are returned as stored. Custom emoji are looked up in
        the guild's emoji list and resolve to ``None`` when the guild or the
        emoji cannot be found.
        """

        emoji = self._get("emoji")
        emoji_id = field(emoji, "id")
        if not emoji_id:
            return emoji
        guild = self.guild
        if guild is None:
            return None
        return find_by_id(field(guild, "emojis"), emoji_id)


__all__ = ["Reaction"]
