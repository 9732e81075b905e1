"""Entry point for `python -m grantdiff`.

Usage:
    python -m grantdiff diff primary.json replica.json
    uv run python -m grantdiff show primary.json
"""

from __future__ import annotations

from grantdiff.cli import cli

cli(prog_name="grantdiff")
