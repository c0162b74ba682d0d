"""
Shared plumbing for struct façades.

:class:`Struct` implements construction through the family's
:class:`~discord_structs.structs.identity.IdentityCache`: calling a struct
class with a record that already has a façade returns that façade untouched.
The helpers below read fields off the bound record and resolve ids through
the installed host collaborators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, ClassVar, Iterable, List

from ..host import get_host
from .identity import IdentityCache


def field(record: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or attribute-style record."""

    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def resolve_all(ids: Iterable[Any] | None, resolver: Callable[[Any], Any]) -> List[Any]:
    """
    Resolve each id in ``ids``.

    Unresolved ids keep a ``None`` placeholder so the result lines up with the
    raw id list.
    """

    return [resolver(i) for i in ids or ()]


def find_by_id(items: Iterable[Any] | None, target_id: Any) -> Any | None:
    for item in items or ():
        if field(item, "id") == target_id:
            return item
    return None


def same_user(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return False
    if left is right:
        return True
    left_id = field(left, "id")
    return left_id is not None and left_id == field(right, "id")


class Struct:
    """Base façade bound to a single raw host record."""

    _cache: ClassVar[IdentityCache]

    def __new__(cls, record: Any, *args: Any):
        return cls._cache.wrap(record, cls._build, *args)

    def __init__(self, record: Any, *args: Any) -> None:
        # Construction happens in __new__ so cache hits ignore their arguments.
        pass

    @classmethod
    def _build(cls, record: Any, *args: Any):
        self = object.__new__(cls)
        self._record = record
        self._setup(*args)
        return self

    def _setup(self, *args: Any) -> None:
        pass

    def _get(self, name: str, default: Any = None) -> Any:
        return field(self._record, name, default)

    @property
    def raw(self) -> Any:
        """The record this façade is currently bound to."""

        return self._record

    @property
    def channel(self) -> Any | None:
        channel_id = self.channel_id
        if channel_id is None:
            return None
        return get_host().channels.by_id(channel_id)

    @property
    def guild(self) -> Any | None:
        channel = self.channel
        return field(channel, "guild") if channel is not None else None

    @property
    def channel_id(self) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._get('id')!r}>"


class ChildStruct(Struct):
    """Façade for a record owned by a message (embeds, reactions)."""

    def _setup(self, message_id: Any, channel_id: Any) -> None:
        self._message_id = message_id
        self._channel_id = channel_id

    @property
    def message_id(self) -> Any:
        return self._message_id

    @property
    def channel_id(self) -> Any:
        return self._channel_id

    @property
    def message(self) -> Any | None:
        """The owning message, searched in the resolved channel's messages."""

        channel = self.channel
        if channel is None:
            return None
        return find_by_id(field(channel, "messages"), self._message_id)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} message_id={self._message_id!r} channel_id={self._channel_id!r}>"


__all__ = ["Struct", "ChildStruct", "field", "resolve_all", "find_by_id", "same_user"]
