"""Embed façade."""

from __future__ import annotations

from typing import Any

from .base import ChildStruct
from .identity import IdentityCache


class Embed(ChildStruct):
    """Rich embed attached to a message."""

    _cache = IdentityCache("embed")

    @property
    def title(self) -> str | None:
        return self._get("title")

    @property
    def type(self) -> str | None:
        return self._get("type")

    @property
    def description(self) -> str | None:
        return self._get("description")

    @property
    def url(self) -> str | None:
        return self._get("url")

    @property
    def timestamp(self) -> Any:
        return self._get("timestamp")

    @property
    def colour(self) -> int | None:
        return self._get("color")

    @property
    def footer(self) -> Any:
        return self._get("footer")

    @property
    def image(self) -> Any:
        return self._get("image")

    @property
    def thumbnail(self) -> Any:
        return self._get("thumbnail")

    @property
    def video(self) -> Any:
        return self._get("video")

    @property
    def provider(self) -> Any:
        return self._get("provider")

    @property
    def author(self) -> Any:
        return self._get("author")

    @property
    def fields(self) -> Any:
        return self._get("fields")


__all__ = ["Embed"]
