"""Discrepancy data structures produced by the sorted-merge differ."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Side(StrEnum):
    """Which input of a comparison a record was found on."""

    LEFT = "left"
    RIGHT = "right"


class GrantKind(StrEnum):
    """Record variant being compared.  The value is used in messages."""

    USER = "user"
    DB = "db"


@dataclass(frozen=True)
class ExtraRecord:
    """A key present on ``side`` but absent on the other input."""

    side: Side
    kind: GrantKind
    key: str

    def message(self, left_name: str, right_name: str) -> str:
        side_name = left_name if self.side is Side.LEFT else right_name
        return f"{side_name} has an extra {self.kind} {self.key}"

    def to_dict(self) -> dict[str, str]:
        return {"type": "extra", "side": str(self.side), "kind": str(self.kind), "key": self.key}


@dataclass(frozen=True)
class ValueMismatch:
    """Same key on both inputs, different rendered value."""

    kind: GrantKind
    key: str
    left_rendered: str
    right_rendered: str

    def message(self, left_name: str, right_name: str) -> str:
        return (
            f"permissions differ on {self.kind} {self.key}:\n"
            f"{left_name}: {self.left_rendered}\n"
            f" differs from:\n"
            f"{right_name}: {self.right_rendered}"
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "type": "mismatch",
            "kind": str(self.kind),
            "key": self.key,
            "left_rendered": self.left_rendered,
            "right_rendered": self.right_rendered,
        }


Discrepancy = ExtraRecord | ValueMismatch
