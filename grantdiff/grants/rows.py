"""Build grant records from grant-table query rows.

A row is a list of column names plus a parallel list of values, as returned
by ``SELECT * FROM mysql.user`` / ``mysql.db``.  Identity columns become
record fields; every other column becomes a privilege entry.
"""

from __future__ import annotations

from collections.abc import Sequence

from grantdiff.grants.checksum import crc64_iso
from grantdiff.models.grants import DatabaseGrant, UserGrant

# Differs legitimately between a primary and its replicas.
_SKIPPED_USER_COLUMNS = frozenset({"password_last_changed"})


def to_text(value: object) -> str:
    """Column value as text; NULL becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, bytes | bytearray):
        return bytes(value).decode("utf-8")
    return str(value)


def _to_bytes(value: object) -> bytes:
    if value is None:
        return b""
    if isinstance(value, bytes | bytearray):
        return bytes(value)
    return str(value).encode("utf-8")


def _check_row(fields: Sequence[str], values: Sequence[object]) -> None:
    if len(fields) != len(values):
        raise ValueError(f"Row has {len(values)} values for {len(fields)} fields")


def new_user_grant(fields: Sequence[str], values: Sequence[object]) -> UserGrant:
    """Build a UserGrant from one ``mysql.user`` row.

    Identity columns are matched case-insensitively.  The password column is
    reduced to its CRC-64 checksum and never stored.
    """
    _check_row(fields, values)
    host = ""
    user = ""
    password_checksum = 0
    privileges: dict[str, str] = {}
    for name, value in zip(fields, values):
        match name.lower():
            case "host":
                host = to_text(value)
            case "user":
                user = to_text(value)
            case "password":
                password_checksum = crc64_iso(_to_bytes(value))
            case lowered if lowered in _SKIPPED_USER_COLUMNS:
                continue
            case _:
                privileges[name] = to_text(value)
    return UserGrant(host=host, user=user, password_checksum=password_checksum, privileges=privileges)


def new_db_grant(fields: Sequence[str], values: Sequence[object]) -> DatabaseGrant:
    """Build a DatabaseGrant from one ``mysql.db`` row (exact column names)."""
    _check_row(fields, values)
    host = ""
    db = ""
    user = ""
    privileges: dict[str, str] = {}
    for name, value in zip(fields, values):
        match name:
            case "Host":
                host = to_text(value)
            case "Db":
                db = to_text(value)
            case "User":
                user = to_text(value)
            case _:
                privileges[name] = to_text(value)
    return DatabaseGrant(host=host, db=db, user=user, privileges=privileges)
