"""Record types for the account and credential registries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CredentialRecord(BaseModel):
    """One entry of the credential registry (``/etc/shadow``)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    password_hash: str = ""
    last_changed: int = 0  # days since 1970-01-01
    minimum: int = 0
    maximum: int = 0
    warn: int = 0
    inactive: int = 0
    expire: int = 0  # days since 1970-01-01

    @property
    def is_empty(self) -> bool:
        return self == CredentialRecord()

    def password_age_days(self, epoch_seconds: int) -> int:
        """Days since the last password change, or -1 without aging data."""
        if self.last_changed <= 0:
            return -1
        return int(epoch_seconds) // 86400 - self.last_changed


class AccountRecord(BaseModel):
    """One entry of the account registry (``/etc/passwd``) merged with its credential."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    username: str = ""
    credential: CredentialRecord = Field(default_factory=CredentialRecord)
    uid: int = 0
    gid: int = 0
    comment: str = ""
    home_directory: str = ""
    shell: str = ""

    @property
    def is_empty(self) -> bool:
        return self == AccountRecord()

    def to_passwd_line(self) -> str:
        return ":".join(
            [
                self.username,
                "x",
                str(self.uid),
                str(self.gid),
                self.comment,
                self.home_directory,
                self.shell,
            ]
        )
