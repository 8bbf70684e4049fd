"""Shared fixtures: registry files written to tmp_path."""
from __future__ import annotations

from pathlib import Path

import pytest

from ncs_accounts import AccountRegistry, RegistryConfig, StaticIdentity

PASSWD = """\
root:x:0:0:root:/root:/bin/bash
daemon:x:1:1:daemon:/usr/sbin:/usr/sbin/nologin
alice:x:1000:1000:Alice:/home/alice:/bin/bash
bob:x:1001:1001:Bob,,,:/home/bob:/bin/sh
"""

SHADOW = """\
root:!:19000:0:99999:7:::
daemon:*:19000:0:99999:7:::
alice:$6$hash:18000:0:99999:7:::
bob:$6$other:19500:1:90:14:30:20000:
"""


def write_registries(directory: Path, passwd: str = PASSWD, shadow: str | None = SHADOW) -> RegistryConfig:
    passwd_path = directory / "passwd"
    shadow_path = directory / "shadow"
    passwd_path.write_text(passwd, encoding="utf-8")
    if shadow is not None:
        shadow_path.write_text(shadow, encoding="utf-8")
    return RegistryConfig(passwd_path=str(passwd_path), shadow_path=str(shadow_path))


@pytest.fixture()
def registry_config(tmp_path):
    return write_registries(tmp_path)


@pytest.fixture()
def root_registry(registry_config):
    return AccountRegistry(config=registry_config, identity=StaticIdentity(0))


@pytest.fixture()
def user_registry(registry_config):
    return AccountRegistry(config=registry_config, identity=StaticIdentity(1000))
