"""Key/value projection of grant records.

The differ never touches concrete record types.  It works against
``PermissionList``, which exposes each record as a ``(key, rendered_value)``
pair; one adapter exists per record kind.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from grantdiff.grants.printable import render_privileges
from grantdiff.models.discrepancy import GrantKind
from grantdiff.models.grants import DatabaseGrant, UserGrant


class PermissionList(Protocol):
    """Indexed view of one record kind, ordered by primary key."""

    kind: GrantKind

    def __len__(self) -> int: ...

    def key_at(self, i: int) -> str: ...

    def rendered_value_at(self, i: int) -> str: ...

    def get(self, i: int) -> tuple[str, str]: ...


def user_grant_key(grant: UserGrant) -> str:
    """Sorting key for a UserGrant: ``host:user``."""
    return f"{grant.host}:{grant.user}"


def user_grant_value(grant: UserGrant) -> str:
    if grant.password_checksum == 0:
        password = "NoPassword"
    else:
        password = f"PasswordChecksum({grant.password_checksum})"
    return password + render_privileges(grant.privileges)


def db_grant_key(grant: DatabaseGrant) -> str:
    """Sorting key for a DatabaseGrant: ``host:db:user``."""
    return f"{grant.host}:{grant.db}:{grant.user}"


def db_grant_value(grant: DatabaseGrant) -> str:
    return render_privileges(grant.privileges)


class UserGrantList:
    """PermissionList adapter over a sequence of UserGrant."""

    kind = GrantKind.USER

    def __init__(self, grants: Sequence[UserGrant]) -> None:
        self._grants = grants

    def __len__(self) -> int:
        return len(self._grants)

    def key_at(self, i: int) -> str:
        return user_grant_key(self._grants[i])

    def rendered_value_at(self, i: int) -> str:
        return user_grant_value(self._grants[i])

    def get(self, i: int) -> tuple[str, str]:
        return self.key_at(i), self.rendered_value_at(i)


class DbGrantList:
    """PermissionList adapter over a sequence of DatabaseGrant."""

    kind = GrantKind.DB

    def __init__(self, grants: Sequence[DatabaseGrant]) -> None:
        self._grants = grants

    def __len__(self) -> int:
        return len(self._grants)

    def key_at(self, i: int) -> str:
        return db_grant_key(self._grants[i])

    def rendered_value_at(self, i: int) -> str:
        return db_grant_value(self._grants[i])

    def get(self, i: int) -> tuple[str, str]:
        return self.key_at(i), self.rendered_value_at(i)
