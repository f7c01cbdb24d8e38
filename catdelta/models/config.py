"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DeltaOptions:
    """Options accepted by the comparison entry point."""

    ignore_tags: bool = False
    verbose: bool = False  # keep attributes of added/missing resources


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    json_output: bool = True


@dataclass
class CatDeltaConfig:
    """Top-level catdelta configuration."""

    delta: DeltaOptions = field(default_factory=DeltaOptions)
    log: LogConfig = field(default_factory=LogConfig)
