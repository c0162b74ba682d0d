import pytest

import discord_structs
from discord_structs import host as host_module
from discord_structs.errors import HostNotInstalled


def test_get_host_requires_install():
    host_module.uninstall()

    with pytest.raises(HostNotInstalled):
        host_module.get_host()


def test_install_exposes_current_user(host, users):
    assert host_module.get_host() is host.api
    assert host_module.current_user() is users.alice

    host.acting = users.bob

    assert host_module.current_user() is users.bob


def test_package_reexports_install():
    assert discord_structs.install is host_module.install
    assert discord_structs.Message.from_record is not None
