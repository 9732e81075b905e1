"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DiffConfig:
    """Comparison behaviour."""

    check_order: bool = False
    output_format: str = "text"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"


@dataclass
class GrantDiffConfig:
    """Top-level grantdiff configuration."""

    diff: DiffConfig = field(default_factory=DiffConfig)
    log: LogConfig = field(default_factory=LogConfig)
