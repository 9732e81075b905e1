"""Shared fixtures for grantdiff integration tests.

Writes realistic primary/replica snapshot files to a temporary directory so
tests can exercise loading, diffing and the CLI end to end.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from grantdiff.models.grants import DatabaseGrant, PermissionSnapshot, UserGrant
from grantdiff.snapshot_io import dump_snapshot

_FULL_PRIVS = {"Select_priv": "Y", "Insert_priv": "Y", "Update_priv": "Y", "Delete_priv": "Y"}
_READ_PRIVS = {"Select_priv": "Y", "Insert_priv": "N", "Update_priv": "N", "Delete_priv": "N"}


def make_primary() -> PermissionSnapshot:
    """Grant state on the primary."""
    return PermissionSnapshot(
        user_grants=[
            UserGrant(host="%", user="app", password_checksum=0x1F2E3D4C5B6A7988, privileges=_READ_PRIVS),
            UserGrant(host="%", user="reporting", password_checksum=42, privileges=_READ_PRIVS),
            UserGrant(host="localhost", user="root", privileges=_FULL_PRIVS),
        ],
        db_grants=[
            DatabaseGrant(host="%", db="shop", user="app", privileges=_FULL_PRIVS),
            DatabaseGrant(host="%", db="stats", user="reporting", privileges=_READ_PRIVS),
        ],
    )


def make_replica() -> PermissionSnapshot:
    """Replica that missed a revoke and a new account, and gained a stray grant."""
    return PermissionSnapshot(
        user_grants=[
            UserGrant(host="%", user="app", password_checksum=0x1F2E3D4C5B6A7988, privileges=_READ_PRIVS),
            UserGrant(host="localhost", user="root", privileges=_FULL_PRIVS),
        ],
        db_grants=[
            DatabaseGrant(host="%", db="shop", user="app", privileges=_READ_PRIVS),
            DatabaseGrant(host="%", db="stats", user="reporting", privileges=_READ_PRIVS),
            DatabaseGrant(host="%", db="tmp", user="app", privileges={"Select_priv": "Y"}),
        ],
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("GRANTDIFF_LOG_LEVEL", "GRANTDIFF_CHECK_ORDER", "GRANTDIFF_OUTPUT_FORMAT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def primary_snapshot() -> PermissionSnapshot:
    return make_primary()


@pytest.fixture
def primary_file(tmp_path: Path, primary_snapshot: PermissionSnapshot) -> Path:
    path = tmp_path / "primary.json"
    dump_snapshot(primary_snapshot, path)
    return path


@pytest.fixture
def replica_file(tmp_path: Path) -> Path:
    path = tmp_path / "replica.json"
    dump_snapshot(make_replica(), path)
    return path
