"""
Identity cache mapping raw host records to their struct façades.

Each struct family (messages, embeds, reactions) owns one
:class:`IdentityCache`. Lookups compare records by identity, never by value:
two equal dictionaries are still two different records.

Entries are keyed on ``id(record)`` and hold *weak* references to both the
record and its façade. The façade keeps its record alive, so a live façade
pins its entry; once the host and every caller drop both, the weakref
callbacks retire the entry. The stored record reference is checked on every
lookup so a recycled ``id()`` can never resolve to a stale façade.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Dict, Generic, Tuple, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F")

_Entry = Tuple["weakref.ReferenceType[Any]", "weakref.ReferenceType[Any]"]


class IdentityCache(Generic[F]):
    """Weak, identity-keyed mapping of raw record -> façade."""

    def __init__(self, family: str) -> None:
        self.family = family
        self._entries: Dict[int, _Entry] = {}

    def __len__(self) -> int:
        return sum(1 for key in list(self._entries) if self._live(key) is not None)

    def __contains__(self, record: Any) -> bool:
        return self.get(record) is not None

    def __repr__(self) -> str:
        return f"<IdentityCache family={self.family!r} entries={len(self)}>"

    def _live(self, key: int) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        record_ref, facade_ref = entry
        if record_ref() is None:
            return None
        return facade_ref()

    def get(self, record: Any) -> F | None:
        """Return the façade registered for ``record`` or ``None``."""

        entry = self._entries.get(id(record))
        if entry is None:
            return None
        record_ref, facade_ref = entry
        if record_ref() is not record:
            return None
        return facade_ref()

    def register(self, record: Any, facade: F) -> F:
        """Bind ``facade`` to ``record``, replacing any previous entry for it."""

        key = id(record)

        def _discard(ref: weakref.ReferenceType, key: int = key) -> None:
            entry = self._entries.get(key)
            # Only drop the entry these refs belong to; the slot may have been reused.
            if entry is not None and (entry[0] is ref or entry[1] is ref):
                del self._entries[key]

        try:
            record_ref = weakref.ref(record, _discard)
        except TypeError as exc:
            raise TypeError(
                f"{type(record).__name__} records do not support weak references; "
                "wrap them in discord_structs.Record"
            ) from exc
        self._entries[key] = (record_ref, weakref.ref(facade, _discard))
        return facade

    def wrap(self, record: Any, factory: Callable[..., F], *args: Any) -> F:
        """
        Return the cached façade for ``record`` or build one with ``factory``.

        ``args`` are forwarded to ``factory`` only on a miss.
        """

        existing = self.get(record)
        if existing is not None:
            return existing
        facade = factory(record, *args)
        logger.debug("Wrapped new %s record %r", self.family, _record_id(record))
        return self.register(record, facade)

    def clear(self) -> None:
        self._entries.clear()


def _record_id(record: Any) -> Any:
    if hasattr(record, "get"):
        return record.get("id")
    return getattr(record, "id", None)


__all__ = ["IdentityCache"]
