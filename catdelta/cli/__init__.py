"""catdelta command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``catdelta`` script).
"""

from catdelta.cli.main import cli

__all__ = ["cli"]
