"""Grant records: projection, rendering and row construction.

Submodules:
    checksum    -- CRC-64/ISO digest applied to password columns.
    printable   -- Sorted, deterministic rendering of privileges and snapshots.
    projection  -- (key, rendered value) adapters, one per record kind.
    rows        -- Build records from grant-table query rows.
"""

from grantdiff.grants.checksum import crc64_iso
from grantdiff.grants.printable import permissions_string, render_privileges, render_snapshot
from grantdiff.grants.projection import DbGrantList, PermissionList, UserGrantList
from grantdiff.grants.rows import new_db_grant, new_user_grant

__all__ = [
    "DbGrantList",
    "PermissionList",
    "UserGrantList",
    "crc64_iso",
    "new_db_grant",
    "new_user_grant",
    "permissions_string",
    "render_privileges",
    "render_snapshot",
]
