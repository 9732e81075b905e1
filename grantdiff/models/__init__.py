"""Core data structures for grantdiff."""

from grantdiff.models.config import GrantDiffConfig
from grantdiff.models.discrepancy import (
    Discrepancy,
    ExtraRecord,
    GrantKind,
    Side,
    ValueMismatch,
)
from grantdiff.models.grants import DatabaseGrant, PermissionSnapshot, UserGrant

__all__ = [
    "DatabaseGrant",
    "Discrepancy",
    "ExtraRecord",
    "GrantDiffConfig",
    "GrantKind",
    "PermissionSnapshot",
    "Side",
    "UserGrant",
    "ValueMismatch",
]
