"""Logging and metrics for grantdiff."""

from grantdiff.observability.logging import comparison_context, get_logger, setup_logging

__all__ = ["comparison_context", "get_logger", "setup_logging"]
