"""Flat user inventory rows, in the shape the Linux discovery report consumes."""

from __future__ import annotations

from typing import Any

from ncs_accounts.models import AccountRecord


def build_user_inventory(records: list[AccountRecord], epoch_seconds: int) -> list[dict[str, Any]]:
    """
    One row per account: name, uid, gid, home, shell, password_age_days.

    password_age_days == -1 means no credential data (unprivileged read,
    missing shadow entry, or last_changed unset).
    """
    return [
        {
            "name": record.username,
            "uid": record.uid,
            "gid": record.gid,
            "home": record.home_directory,
            "shell": record.shell,
            "password_age_days": record.credential.password_age_days(epoch_seconds),
        }
        for record in records
    ]
