"""grantdiff: grant-consistency diff between database replicas.

Compares two permission snapshots (user grants and per-database grants) with
a single sorted-merge pass per record kind and reports every extra record and
every value mismatch as a message in an error recorder.
"""

from grantdiff.differ import (
    AllErrorRecorder,
    ErrorRecorder,
    collect_discrepancies,
    diff_permissions,
    diff_permissions_to_list,
)
from grantdiff.grants import permissions_string
from grantdiff.models import DatabaseGrant, PermissionSnapshot, UserGrant

__version__ = "0.1.0"

__all__ = [
    "AllErrorRecorder",
    "DatabaseGrant",
    "ErrorRecorder",
    "PermissionSnapshot",
    "UserGrant",
    "__version__",
    "collect_discrepancies",
    "diff_permissions",
    "diff_permissions_to_list",
    "permissions_string",
]
