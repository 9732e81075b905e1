"""Grant record data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserGrant:
    """User-level grant row (one principal, scoped to a host).

    ``password_checksum`` is a CRC-64/ISO digest of the credential column;
    0 means the account has no password.  Raw passwords never reach this type.
    """

    host: str
    user: str
    password_checksum: int = 0
    privileges: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DatabaseGrant:
    """Per-database grant row for one principal."""

    host: str
    db: str
    user: str
    privileges: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PermissionSnapshot:
    """All grant rows read from one instance at one point in time.

    Both sequences are expected in ascending primary-key order.
    """

    user_grants: list[UserGrant] = field(default_factory=list)
    db_grants: list[DatabaseGrant] = field(default_factory=list)
