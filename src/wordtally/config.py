"""Configuration parsing for word counting runs."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .separators import DEFAULT_SEPARATORS, build_separator_set

DEFAULT_ENCODING = "utf-8"


@dataclass
class ReportConfig:
    """Settings for the HTML report."""

    close_tags: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReportConfig":
        """Create ReportConfig from YAML dict."""
        unknown = set(data) - {"close_tags"}
        if unknown:
            raise ValueError(f"Unknown report settings: {', '.join(sorted(unknown))}")
        close_tags = data.get("close_tags", True)
        if not isinstance(close_tags, bool):
            raise ValueError(f"'close_tags' must be true or false, got {close_tags!r}")
        return cls(close_tags=close_tags)


@dataclass
class CounterConfig:
    """Configuration for a word counting run."""

    separators: str = DEFAULT_SEPARATORS
    encoding: str = DEFAULT_ENCODING
    report: ReportConfig = field(default_factory=ReportConfig)
    _separator_set: frozenset[str] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate settings after init."""
        if not self.separators:
            raise ValueError("'separators' must contain at least one character")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CounterConfig":
        """Create CounterConfig from YAML dict.

        Missing keys take their defaults; unknown keys are rejected.
        """
        unknown = set(data) - {"separators", "encoding", "report"}
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        for key in ("separators", "encoding"):
            if key in data and not isinstance(data[key], str):
                raise ValueError(f"'{key}' must be a string, got {data[key]!r}")
        report = data.get("report") or {}
        if not isinstance(report, dict):
            raise ValueError(f"'report' must be a mapping, got {report!r}")
        return cls(
            separators=data.get("separators", DEFAULT_SEPARATORS),
            encoding=data.get("encoding", DEFAULT_ENCODING),
            report=ReportConfig.from_dict(report),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "CounterConfig":
        """Load configuration from a YAML file. An empty file gives the defaults."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls.from_dict(data)

    def separator_set(self) -> frozenset[str]:
        """Get the separator set, building it on first use."""
        if self._separator_set is None:
            self._separator_set = build_separator_set(self.separators)
        return self._separator_set
