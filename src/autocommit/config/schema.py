"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

InputFormat = Literal["auto", "status", "diff-index"]
OutputFormat = Literal["text", "json"]
LogLevel = Literal["debug", "info", "warning", "error"]

INPUT_FORMATS = ("auto", "status", "diff-index")
OUTPUT_FORMATS = ("text", "json")


@dataclass
class InputConfig:
    format: InputFormat = "auto"  # auto detects per line


@dataclass
class OutputConfig:
    format: OutputFormat = "text"
    explain: bool = False  # print the per-file table on stderr


@dataclass
class LoggingConfig:
    level: LogLevel = "warning"


@dataclass
class AutoCommitConfig:
    version: str = "1.0"
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
