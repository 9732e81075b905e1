"""Permission differ.

Submodules:
    merge         -- Two-pointer sorted merge over PermissionList views.
    orchestrator  -- Runs the merge per record kind and formats messages.
    recorder      -- ErrorRecorder protocol and the AllErrorRecorder sink.
"""

from grantdiff.differ.merge import check_sorted, diff_sorted
from grantdiff.differ.orchestrator import (
    collect_discrepancies,
    diff_permissions,
    diff_permissions_to_list,
)
from grantdiff.differ.recorder import AllErrorRecorder, ErrorRecorder

__all__ = [
    "AllErrorRecorder",
    "ErrorRecorder",
    "check_sorted",
    "collect_discrepancies",
    "diff_permissions",
    "diff_permissions_to_list",
    "diff_sorted",
]
