"""Report scheduler state domain model."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Idle:
    """No delayed report is pending."""


@dataclass(frozen=True)
class Armed:
    """A delayed report is pending.

    Attributes:
        fire_at: Wall-clock time (seconds since the epoch) the report is due.
        baseline: Presence snapshot taken when the report was scheduled.
        handle: Timer handle used to cancel the pending report.
    """

    fire_at: float
    baseline: Mapping[str, str]
    handle: Any


ReportState = Idle | Armed
