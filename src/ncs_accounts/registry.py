"""
Loader and lookups over the merged account + credential registries.

Every call re-reads both files; nothing is cached between calls. The
credential registry is only read when the identity is privileged. For
anyone else every credential is the zero-value record and no error is raised.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ncs_accounts.config import RegistryConfig
from ncs_accounts.errors import NotFoundError, ParseError, ReadError
from ncs_accounts.identity import IdentityContext, ProcessIdentity
from ncs_accounts.models import AccountRecord, CredentialRecord
from ncs_accounts.parsing import find_credential, parse_account_line

logger = logging.getLogger(__name__)


def read_registry(path: str | Path, encoding: str = "utf-8") -> str:
    """Read and decode a whole registry file, wrapping OS failures in ReadError."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ReadError(f"failed to read {path}: {exc}", path=str(path)) from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data.decode(encoding, errors="surrogateescape")


class AccountRegistry:
    """Queries over the account registry, with credentials merged in by username."""

    def __init__(
        self,
        config: RegistryConfig | None = None,
        identity: IdentityContext | None = None,
    ) -> None:
        self.config = config or RegistryConfig()
        self.identity = identity if identity is not None else ProcessIdentity()

    def __repr__(self) -> str:
        return f"AccountRegistry(passwd={self.config.passwd_path!r}, identity={self.identity!r})"

    def _read_credentials(self) -> str | None:
        if not self.identity.is_privileged():
            logger.debug("Identity %r is not privileged; skipping %s", self.identity, self.config.shadow_path)
            return None
        return read_registry(self.config.shadow_path, self.config.encoding)

    def get_all(self) -> list[AccountRecord]:
        """Parse every account in file order. One bad line fails the whole load."""
        passwd = read_registry(self.config.passwd_path, self.config.encoding)
        shadow = self._read_credentials()

        records: list[AccountRecord] = []
        for line_number, line in enumerate(passwd.split("\n"), start=1):
            if line == "":
                continue
            try:
                account = parse_account_line(line)
            except ParseError as exc:
                raise ParseError(
                    f"failed to parse passwd line {line_number}: {exc}",
                    field=exc.field,
                    line_number=line_number,
                ) from exc

            if shadow is None:
                credential = CredentialRecord()
            else:
                try:
                    credential = find_credential(shadow, account.username)
                except ParseError as exc:
                    raise ParseError(
                        f"failed to parse shadow line {exc.line_number} for {account.username!r}: {exc}",
                        field=exc.field,
                        line_number=exc.line_number,
                    ) from exc

            records.append(account.model_copy(update={"credential": credential}))

        logger.debug("Loaded %d accounts from %s", len(records), self.config.passwd_path)
        return records

    def _load_for_lookup(self) -> list[AccountRecord]:
        try:
            return self.get_all()
        except ReadError as exc:
            raise ReadError(f"failed to get every user: {exc}", path=exc.path) from exc
        except ParseError as exc:
            raise ParseError(
                f"failed to get every user: {exc}",
                field=exc.field,
                line_number=exc.line_number,
            ) from exc

    def current(self) -> AccountRecord:
        """Return the account whose UID is the effective identity, or raise NotFoundError."""
        euid = self.identity.effective_uid()
        for record in self._load_for_lookup():
            if record.uid == euid:
                return record
        raise NotFoundError(f"failed to find the current user (uid {euid}) in {self.config.passwd_path}")

    def lookup(self, username: str) -> AccountRecord:
        """Return the account named *username*, or the zero-value record."""
        for record in self._load_for_lookup():
            if record.username == username:
                return record
        return AccountRecord()

    def lookup_by_id(self, uid: int) -> AccountRecord:
        """Return the first account with *uid*, or the zero-value record."""
        for record in self._load_for_lookup():
            if record.uid == uid:
                return record
        return AccountRecord()


def get_all() -> list[AccountRecord]:
    return AccountRegistry().get_all()


def current() -> AccountRecord:
    return AccountRegistry().current()


def lookup(username: str) -> AccountRecord:
    return AccountRegistry().lookup(username)


def lookup_by_id(uid: int) -> AccountRecord:
    return AccountRegistry().lookup_by_id(uid)
