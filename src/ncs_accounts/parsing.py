"""Line parsers for the account (passwd) and credential (shadow) registries."""

from __future__ import annotations

import logging
import re

from ncs_accounts.errors import ParseError
from ncs_accounts.models import AccountRecord, CredentialRecord

logger = logging.getLogger(__name__)

ACCOUNT_FIELD_COUNT = 7
CREDENTIAL_FIELD_COUNT = 8

# Numeric shadow columns in file order, starting at index 2.
_CREDENTIAL_DAY_FIELDS = ("last_changed", "minimum", "maximum", "warn", "inactive", "expire")

# Optionally signed ASCII digits and nothing else.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(value: str, field: str) -> int:
    """Convert a numeric column, leaving empty columns at 0."""
    if value == "":
        return 0
    if not _INTEGER_RE.fullmatch(value):
        raise ParseError(f"failed to convert {field}: invalid integer {value!r}", field=field)
    return int(value)


def _split(line: str, minimum: int, kind: str) -> list[str]:
    fields = line.split(":")
    if len(fields) < minimum:
        raise ParseError(
            f"{kind} line has {len(fields)} fields, expected at least {minimum}",
            field="fields",
        )
    return fields


def parse_account_line(line: str) -> AccountRecord:
    """
    Parse one line of the account registry.

    The password column (index 1) is ignored; credential data only ever
    comes from the credential registry.
    """
    fields = _split(line, ACCOUNT_FIELD_COUNT, "passwd")
    return AccountRecord(
        username=fields[0],
        uid=_to_int(fields[2], "uid"),
        gid=_to_int(fields[3], "gid"),
        comment=fields[4],
        home_directory=fields[5],
        shell=fields[6],
    )


def parse_credential_line(line: str) -> CredentialRecord:
    """Parse one line of the credential registry into a CredentialRecord."""
    fields = _split(line, CREDENTIAL_FIELD_COUNT, "shadow")
    values = {
        name: _to_int(raw, name)
        for name, raw in zip(_CREDENTIAL_DAY_FIELDS, fields[2:CREDENTIAL_FIELD_COUNT])
    }
    return CredentialRecord(password_hash=fields[1], **values)


def find_credential(content: str, username: str) -> CredentialRecord:
    """
    Locate *username* in the decoded credential registry and parse its line.

    Returns the zero-value record when no line belongs to *username*.
    """
    for line_number, line in enumerate(content.split("\n"), start=1):
        if not line or line.split(":", 1)[0] != username:
            continue
        try:
            return parse_credential_line(line)
        except ParseError as exc:
            exc.line_number = line_number
            raise
    logger.debug("No credential entry for %r", username)
    return CredentialRecord()
