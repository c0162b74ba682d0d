"""
Process-wide registry for the host application's collaborators.

The host calls :func:`install` once during startup with a :class:`HostApi`
describing its store, lookups, network layer and UI actions. Structs read the
registry lazily on every access, so re-installing (for example between tests)
takes effect immediately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from .errors import HostNotInstalled
from .ports import (
    ContentParser,
    EntityLookup,
    MessageActions,
    MessageStore,
    Network,
    PermissionChecker,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HostApi:
    """Bundle of collaborators the struct layer consumes."""

    store: MessageStore
    channels: EntityLookup
    users: EntityLookup
    network: Network
    parser: ContentParser
    actions: MessageActions
    permissions: PermissionChecker
    current_user: Callable[[], Any]


_HOST: HostApi | None = None


def install(host: HostApi) -> HostApi:
    """Register ``host`` as the active collaborator bundle."""

    global _HOST
    if _HOST is not None and _HOST is not host:
        logger.info("Replacing installed host collaborators.")
    _HOST = host
    return host


def uninstall() -> None:
    global _HOST
    _HOST = None


def get_host() -> HostApi:
    """Return the installed :class:`HostApi` or raise :class:`HostNotInstalled`."""

    if _HOST is None:
        raise HostNotInstalled("No host collaborators installed; call discord_structs.install() first.")
    return _HOST


def current_user() -> Any:
    return get_host().current_user()


__all__ = ["HostApi", "install", "uninstall", "get_host", "current_user"]
