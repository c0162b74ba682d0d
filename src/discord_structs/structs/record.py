"""Weak-referenceable mapping for hosts that keep records as plain JSON."""

from __future__ import annotations


class Record(dict):
    """
    ``dict`` that can be weakly referenced.

    Plain ``dict`` instances cannot be weakly referenced, so they cannot be
    identity-cached. Nested mappings are left as-is; only records that get
    wrapped (messages, embeds, reactions) need to be ``Record`` instances.
    """

    __slots__ = ("__weakref__",)

    def __repr__(self) -> str:
        return f"Record({dict.__repr__(self)})"


def to_record(data: dict, *, children: tuple[str, ...] = ("embeds", "reactions")) -> Record:
    """
    Convert a decoded message payload into a :class:`Record`.

    Lists under ``children`` are converted element-wise so embeds and
    reactions can be wrapped as well.
    """

    record = Record(data)
    for key in children:
        items = record.get(key)
        if isinstance(items, list):
            record[key] = [i if isinstance(i, Record) else Record(i) for i in items]
    return record


__all__ = ["Record", "to_record"]
