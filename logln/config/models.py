"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FileConfig:
    """Log file settings."""

    enabled: bool = False
    directory: str = ""
    name: str = ""
    encoding: str = "utf-8"


@dataclass
class ConsoleConfig:
    """Console output settings."""

    enabled: bool = True


@dataclass
class SuccessConfig:
    """Defaults for success lines written by the combinators."""

    level: int = 0
    silent: bool = False


@dataclass
class Config:
    """Top-level configuration container."""

    file: FileConfig = field(default_factory=FileConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    success: SuccessConfig = field(default_factory=SuccessConfig)
