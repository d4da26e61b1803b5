"""Base formatter interface for go-complexity output rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from ..config import ThresholdConfig
from ..metrics.models import MetricsResult


@dataclass(frozen=True)
class ReportContext:
    """What a formatter needs besides the results themselves."""

    file_name: str
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, results: List[MetricsResult], context: ReportContext) -> None:
        """Render results to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, results: List[MetricsResult], context: ReportContext) -> str:
        """Return formatted string representation of results."""
