import os, sys
import warnings
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Keep host environment overrides out of the endpoint templates under test
os.environ.pop("DISCORD_MESSAGES_ENDPOINT", None)
os.environ.pop("DISCORD_API_BASE", None)
os.environ.pop("DISCORD_STRUCTS_CONFIG", None)
os.environ.setdefault("DISCORD_API_TOKEN", "test-token")

# Silence deprecation warnings surfaced from discord.py voice support during tests
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


def pytest_configure(config):
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


from discord_structs import host as host_module  # noqa: E402
from discord_structs.errors import InsufficientPermissions  # noqa: E402
from discord_structs.host import HostApi  # noqa: E402
from discord_structs.ports import ApiResponse  # noqa: E402


class FakeStore:
    def __init__(self) -> None:
        self.messages: dict = {}
        self.canonical: dict = {}
        self.canonical_calls: list = []

    def find_message(self, channel_id, message_id):
        return self.messages.get((channel_id, message_id))

    def canonical_record(self, message_id, revision_id):
        self.canonical_calls.append((message_id, revision_id))
        return self.canonical.get((message_id, revision_id))


class FakeLookup:
    def __init__(self, entities=None) -> None:
        self.entities = dict(entities or {})

    def by_id(self, entity_id):
        return self.entities.get(entity_id)


class FakeNetwork:
    def __init__(self) -> None:
        self.calls: list = []
        self.patch_body: dict = {"id": "1"}
        self.error: Exception | None = None

    def delete(self, endpoint):
        self.calls.append(("delete", endpoint, None))

        async def _send():
            if self.error is not None:
                raise self.error
            return ApiResponse(status=204)

        return _send()

    def patch(self, endpoint, body):
        self.calls.append(("patch", endpoint, body))

        async def _send():
            if self.error is not None:
                raise self.error
            return ApiResponse(status=200, body=self.patch_body)

        return _send()


class FakeParser:
    def __init__(self) -> None:
        self.calls: list = []

    def parse(self, record, raw_input):
        self.calls.append((record, raw_input))
        return {"content": raw_input.upper(), "parsed": True}


class FakeActions:
    def __init__(self) -> None:
        self.calls: list = []

    def jump_to_message(self, channel_id, message_id, flash):
        self.calls.append(("jump", channel_id, message_id, flash))

    def start_edit_message(self, channel_id, message_id, content):
        self.calls.append(("start_edit", channel_id, message_id, content))

    def end_edit_message(self):
        self.calls.append(("end_edit",))


class FakePermissions:
    def __init__(self) -> None:
        self.granted = False
        self.calls: list = []

    def assert_permission(self, channel, permission, flag):
        self.calls.append((channel, permission, flag))
        if not self.granted:
            raise InsufficientPermissions(permission)


@pytest.fixture
def users():
    return SimpleNamespace(
        alice=SimpleNamespace(id="A", name="alice"),
        bob=SimpleNamespace(id="B", name="bob"),
    )


@pytest.fixture
def host(users):
    """Install a fake host; ``host.acting`` selects the current user."""

    env = SimpleNamespace(
        store=FakeStore(),
        channels=FakeLookup(),
        users=FakeLookup({"A": users.alice, "B": users.bob}),
        network=FakeNetwork(),
        parser=FakeParser(),
        actions=FakeActions(),
        permissions=FakePermissions(),
        acting=users.alice,
    )
    api = HostApi(
        store=env.store,
        channels=env.channels,
        users=env.users,
        network=env.network,
        parser=env.parser,
        actions=env.actions,
        permissions=env.permissions,
        current_user=lambda: env.acting,
    )
    host_module.install(api)
    env.api = api
    yield env
    host_module.uninstall()


@pytest.fixture
def guild():
    return SimpleNamespace(
        id="G",
        roles=[SimpleNamespace(id="R1", name="mods")],
        emojis=[SimpleNamespace(id="E1", name="brain")],
    )


@pytest.fixture
def channel(host, guild, users):
    """Register channel ``c1`` owned by bob in ``guild``."""

    chan = SimpleNamespace(id="c1", guild=guild, owner=users.bob, messages=[])
    host.channels.entities["c1"] = chan
    return chan
