"""grantdiff command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``grantdiff`` script).
"""

from grantdiff.cli.main import cli

__all__ = ["cli"]
