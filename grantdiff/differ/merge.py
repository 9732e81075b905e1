"""Sorted-merge comparison of two key-ordered permission lists.

Both inputs must be sorted ascending by key with no duplicate keys.  The
merge trusts that; ``check_sorted`` is available for callers that want it
enforced.  With unsorted input the merge still terminates but may report
spurious extras in no particular order.
"""

from __future__ import annotations

from collections.abc import Iterator

from grantdiff.errors import UnsortedGrantsError
from grantdiff.grants.projection import PermissionList
from grantdiff.models.discrepancy import Discrepancy, ExtraRecord, Side, ValueMismatch
from grantdiff.observability.logging import get_logger

_logger = get_logger("differ.merge")


def check_sorted(records: PermissionList) -> None:
    """Raise UnsortedGrantsError unless keys are strictly increasing."""
    for i in range(1, len(records)):
        previous_key = records.key_at(i - 1)
        key = records.key_at(i)
        if not previous_key < key:
            raise UnsortedGrantsError(str(records.kind), i, previous_key, key)


def diff_sorted(left: PermissionList, right: PermissionList) -> Iterator[Discrepancy]:
    """Walk *left* and *right* in lockstep, yielding discrepancies in key order.

    A key on one side only is an ExtraRecord for that side.  A key on both
    sides is reported only when the rendered values differ, as a single
    ValueMismatch.
    """
    if left.kind != right.kind:
        raise ValueError(f"Cannot compare {left.kind} grants with {right.kind} grants")
    kind = left.kind
    left_index = 0
    right_index = 0
    while left_index < len(left) and right_index < len(right):
        left_key, left_value = left.get(left_index)
        right_key, right_value = right.get(right_index)

        if left_key < right_key:
            yield ExtraRecord(side=Side.LEFT, kind=kind, key=left_key)
            left_index += 1
            continue

        if left_key > right_key:
            yield ExtraRecord(side=Side.RIGHT, kind=kind, key=right_key)
            right_index += 1
            continue

        if left_value != right_value:
            yield ValueMismatch(
                kind=kind,
                key=left_key,
                left_rendered=left_value,
                right_rendered=right_value,
            )
        left_index += 1
        right_index += 1

    for i in range(left_index, len(left)):
        yield ExtraRecord(side=Side.LEFT, kind=kind, key=left.key_at(i))
    for i in range(right_index, len(right)):
        yield ExtraRecord(side=Side.RIGHT, kind=kind, key=right.key_at(i))

    _logger.debug("merge_completed", kind=str(kind), left_count=len(left), right_count=len(right))
