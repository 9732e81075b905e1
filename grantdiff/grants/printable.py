"""Human-readable rendering of grant records and snapshots.

The rendered privilege string doubles as the comparison value, so its output
must be deterministic: privilege names are always emitted in sorted order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grantdiff.grants.projection import PermissionList
    from grantdiff.models.grants import PermissionSnapshot


def render_privileges(privileges: Mapping[str, str]) -> str:
    """Render ``{"Select_priv": "Y"}`` as ``" Select_priv(Y)"``.

    Every entry carries its own leading space; an empty map renders as ``""``.
    """
    return "".join(f" {name}({privileges[name]})" for name in sorted(privileges))


def render_snapshot(name: str, records: PermissionList) -> str:
    """Render one record kind as a ``<name> Permissions:`` block."""
    lines = [f"{name} Permissions:\n"]
    for i in range(len(records)):
        key, value = records.get(i)
        lines.append(f"  {key}: {value}\n")
    return "".join(lines)


def permissions_string(snapshot: PermissionSnapshot) -> str:
    """Render a whole snapshot, user grants first."""
    # projection imports render_privileges from this module
    from grantdiff.grants.projection import DbGrantList, UserGrantList

    return render_snapshot("User", UserGrantList(snapshot.user_grants)) + render_snapshot(
        "Db", DbGrantList(snapshot.db_grants)
    )
