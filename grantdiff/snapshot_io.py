"""Read and write permission snapshots as JSON files.

File layout::

    {
      "user_permissions": [
        {"host": "%", "user": "app", "password_checksum": 0, "privileges": {"Select_priv": "Y"}}
      ],
      "db_permissions": [
        {"host": "%", "db": "shop", "user": "app", "privileges": {"Insert_priv": "Y"}}
      ]
    }

Loaded sequences are sorted by primary key, matching what a grant query with
``ORDER BY`` on the key columns returns.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from grantdiff.errors import SnapshotFormatError
from grantdiff.grants.projection import db_grant_key, user_grant_key
from grantdiff.grants.rows import to_text
from grantdiff.models.grants import DatabaseGrant, PermissionSnapshot, UserGrant
from grantdiff.observability.logging import get_logger

_logger = get_logger("snapshot_io")


def _require_str(path: Path, entry: dict[str, Any], field: str, section: str, index: int) -> str:
    value = entry.get(field)
    if not isinstance(value, str):
        raise SnapshotFormatError(path, f"{section}[{index}] is missing string field '{field}'")
    return value


def _privileges(path: Path, entry: dict[str, Any], section: str, index: int) -> dict[str, str]:
    privileges = entry.get("privileges", {})
    if not isinstance(privileges, dict):
        raise SnapshotFormatError(path, f"{section}[{index}].privileges must be an object")
    return {str(k): to_text(v) for k, v in privileges.items()}


def _entries(path: Path, obj: dict[str, Any], section: str) -> list[dict[str, Any]]:
    entries = obj.get(section, [])
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise SnapshotFormatError(path, f"'{section}' must be a list of objects")
    return entries


def snapshot_from_dict(obj: dict[str, Any], path: Path | str = "<memory>") -> PermissionSnapshot:
    """Build a key-sorted PermissionSnapshot from a decoded JSON document."""
    path = Path(path)
    if not isinstance(obj, dict):
        raise SnapshotFormatError(path, "top level must be an object")

    user_grants = []
    for i, entry in enumerate(_entries(path, obj, "user_permissions")):
        checksum = entry.get("password_checksum", 0)
        if not isinstance(checksum, int) or isinstance(checksum, bool) or not 0 <= checksum < 2**64:
            raise SnapshotFormatError(path, f"user_permissions[{i}].password_checksum must be an unsigned 64-bit int")
        user_grants.append(
            UserGrant(
                host=_require_str(path, entry, "host", "user_permissions", i),
                user=_require_str(path, entry, "user", "user_permissions", i),
                password_checksum=checksum,
                privileges=_privileges(path, entry, "user_permissions", i),
            )
        )

    db_grants = []
    for i, entry in enumerate(_entries(path, obj, "db_permissions")):
        db_grants.append(
            DatabaseGrant(
                host=_require_str(path, entry, "host", "db_permissions", i),
                db=_require_str(path, entry, "db", "db_permissions", i),
                user=_require_str(path, entry, "user", "db_permissions", i),
                privileges=_privileges(path, entry, "db_permissions", i),
            )
        )

    return PermissionSnapshot(
        user_grants=sorted(user_grants, key=user_grant_key),
        db_grants=sorted(db_grants, key=db_grant_key),
    )


def snapshot_to_dict(snapshot: PermissionSnapshot) -> dict[str, Any]:
    return {
        "user_permissions": [
            {
                "host": g.host,
                "user": g.user,
                "password_checksum": g.password_checksum,
                "privileges": dict(g.privileges),
            }
            for g in snapshot.user_grants
        ],
        "db_permissions": [
            {"host": g.host, "db": g.db, "user": g.user, "privileges": dict(g.privileges)}
            for g in snapshot.db_grants
        ],
    }


def load_snapshot(path: Path | str) -> PermissionSnapshot:
    """Load a snapshot file.  Raises SnapshotFormatError on any problem."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotFormatError(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SnapshotFormatError(path, f"not valid UTF-8 ({exc})") from exc
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotFormatError(path, f"not valid JSON ({exc})") from exc

    snapshot = snapshot_from_dict(obj, path)
    _logger.debug(
        "snapshot_loaded",
        path=str(path),
        user_grants=len(snapshot.user_grants),
        db_grants=len(snapshot.db_grants),
    )
    return snapshot


def dump_snapshot(snapshot: PermissionSnapshot, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(snapshot_to_dict(snapshot), indent=2, sort_keys=True) + "\n", encoding="utf-8")
