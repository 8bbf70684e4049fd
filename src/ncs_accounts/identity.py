"""Identity context consulted for privilege checks and current-user lookups."""

from __future__ import annotations

import os
from typing import Protocol

PRIVILEGED_UID = 0


class IdentityContext(Protocol):
    def effective_uid(self) -> int: ...

    def is_privileged(self) -> bool: ...


class ProcessIdentity:
    """Identity of the running process, read from ``os.geteuid()`` on every call."""

    def effective_uid(self) -> int:
        return os.geteuid()

    def is_privileged(self) -> bool:
        return self.effective_uid() == PRIVILEGED_UID

    def __repr__(self) -> str:
        return "ProcessIdentity()"


class StaticIdentity:
    """Fixed identity. ``privileged`` defaults to ``uid == 0`` when omitted."""

    def __init__(self, uid: int, privileged: bool | None = None) -> None:
        self.uid = int(uid)
        self.privileged = (self.uid == PRIVILEGED_UID) if privileged is None else bool(privileged)

    def effective_uid(self) -> int:
        return self.uid

    def is_privileged(self) -> bool:
        return self.privileged

    def __repr__(self) -> str:
        return f"StaticIdentity(uid={self.uid}, privileged={self.privileged})"
