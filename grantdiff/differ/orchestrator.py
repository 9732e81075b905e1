"""Snapshot-level comparison: user grants, then database grants."""

from __future__ import annotations

from grantdiff.differ.merge import check_sorted, diff_sorted
from grantdiff.differ.recorder import AllErrorRecorder, ErrorRecorder
from grantdiff.grants.projection import DbGrantList, PermissionList, UserGrantList
from grantdiff.models.discrepancy import Discrepancy, ExtraRecord
from grantdiff.models.grants import PermissionSnapshot
from grantdiff.observability.logging import get_logger
from grantdiff.observability.metrics import diff_runs_total, discrepancies_total

_logger = get_logger("differ.orchestrator")


def _projections(snapshot: PermissionSnapshot) -> tuple[PermissionList, PermissionList]:
    return UserGrantList(snapshot.user_grants), DbGrantList(snapshot.db_grants)


def collect_discrepancies(
    left: PermissionSnapshot,
    right: PermissionSnapshot,
    *,
    check_order: bool = False,
) -> list[Discrepancy]:
    """Compare two snapshots and return structured discrepancies.

    User-grant discrepancies come first, then database-grant ones; each kind
    is in key order.  With ``check_order`` every input list is verified to be
    strictly sorted before comparing (UnsortedGrantsError otherwise).
    """
    pairs = list(zip(_projections(left), _projections(right)))
    if check_order:
        for left_list, right_list in pairs:
            check_sorted(left_list)
            check_sorted(right_list)

    found: list[Discrepancy] = []
    counts: dict[str, int] = {}
    for left_list, right_list in pairs:
        before = len(found)
        for discrepancy in diff_sorted(left_list, right_list):
            kind_type = "extra" if isinstance(discrepancy, ExtraRecord) else "mismatch"
            discrepancies_total.labels(kind=str(discrepancy.kind), type=kind_type).inc()
            found.append(discrepancy)
        counts[str(left_list.kind)] = len(found) - before

    diff_runs_total.labels(result="inconsistent" if found else "consistent").inc()
    _logger.info(
        "permissions_diff_completed",
        user_discrepancies=counts.get("user", 0),
        db_discrepancies=counts.get("db", 0),
        left_user_grants=len(left.user_grants),
        right_user_grants=len(right.user_grants),
        left_db_grants=len(left.db_grants),
        right_db_grants=len(right.db_grants),
    )
    return found


def diff_permissions(
    left_name: str,
    left: PermissionSnapshot,
    right_name: str,
    right: PermissionSnapshot,
    recorder: ErrorRecorder,
    *,
    check_order: bool = False,
) -> None:
    """Record one message per discrepancy between two snapshots into *recorder*.

    Nothing is raised for discrepancies; callers check ``recorder.has_errors()``.
    """
    for discrepancy in collect_discrepancies(left, right, check_order=check_order):
        recorder.record_error(discrepancy.message(left_name, right_name))


def diff_permissions_to_list(
    left_name: str,
    left: PermissionSnapshot,
    right_name: str,
    right: PermissionSnapshot,
    *,
    check_order: bool = False,
) -> list[str] | None:
    """Return discrepancy messages in report order, or None when consistent."""
    recorder = AllErrorRecorder()
    diff_permissions(left_name, left, right_name, right, recorder, check_order=check_order)
    if recorder.has_errors():
        return recorder.error_strings()
    return None
