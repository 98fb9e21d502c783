"""Record types flowing through the commit-history pipeline.

All records are frozen: every pipeline step builds new lists of new records
and never edits what it was given.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class CommitPoint:
    """One analysed commit: when it happened and the code size at that point."""
    commit_instant: datetime
    sloc: int = 0
    complexity: float = 0


@dataclass(frozen=True)
class ContributorStat:
    name: str
    commit_count: int = 0


@dataclass(frozen=True)
class DailyFrequency:
    """Commits on one UTC calendar day; `day` is midnight UTC."""
    day: datetime
    commit_count: int = 0


@dataclass(frozen=True)
class CalendarCell:
    """Heatmap cell for one day of the trailing window."""
    day: datetime
    week_index: int
    weekday_index: int
    commit_count: int
    title: str


@dataclass(frozen=True)
class MonthTick:
    day: datetime
    week_index: int
    label: str


@dataclass(frozen=True)
class ProjectMetadata:
    """Normalised project payload, series sorted ascending by time."""
    commit_data: List[CommitPoint] = field(default_factory=list)
    contributor_data: List[ContributorStat] = field(default_factory=list)
    commit_frequency: List[DailyFrequency] = field(default_factory=list)
