"""Entry point for `python -m catdelta`.

Usage:
    python -m catdelta diff baseline.json preview.json
"""

from __future__ import annotations

from catdelta.cli import cli

cli()
