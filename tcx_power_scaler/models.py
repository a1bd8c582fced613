"""Data structures for TCX Power Scaler."""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class ScaleConfig:
    """Settings for one run, fixed before any file is touched."""
    scale_factor: float
    working_folder: Path
    dry_run: bool = False

    def __post_init__(self):
        if not math.isfinite(self.scale_factor) or self.scale_factor == 0:
            raise ConfigurationError(f"Invalid scale factor: {self.scale_factor}")
        if not str(self.working_folder).strip():
            raise ConfigurationError("No working folder")

    @property
    def percent(self) -> float:
        return self.scale_factor * 100


@dataclass
class TcxDocument:
    """Parsed TCX file plus what is needed to write it back unchanged."""
    path: Path
    tree: Any  # lxml.etree._ElementTree
    encoding: str = 'UTF-8'
    xml_declaration: bool = True
    standalone: Optional[bool] = None
    trailing_newline: bool = True
    crlf: bool = False
    preserve_whitespace: bool = True

    @property
    def root(self):
        return self.tree.getroot()


@dataclass
class ScaleSummary:
    """Statistics for one scaled file."""
    point_count: int = 0
    total_power: int = 0
    invalid_count: int = 0

    @property
    def average(self) -> Optional[float]:
        """Average scaled power, or None when no points were scaled."""
        if self.point_count == 0:
            return None
        return self.total_power / self.point_count

    def add_point(self, value: int) -> None:
        self.point_count += 1
        self.total_power += int(value)


@dataclass
class FileResult:
    """Outcome of processing one file."""
    path: Path
    status: str  # 'scaled', 'dry_run', 'failed'
    summary: ScaleSummary = field(default_factory=ScaleSummary)
    backup_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == 'failed'
