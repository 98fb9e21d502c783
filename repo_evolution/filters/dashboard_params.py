"""Dashboard query parameter parsing."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from repo_evolution.visualizers.date_normalizer import normalize_instant
from repo_evolution.visualizers.window_filter import window_start


@dataclass
class DashboardParams:
    """Parsed dashboard parameters from request args."""
    now: datetime
    window_days: int = 365
    top_n: int = 30
    trend_fraction: float = 0.125
    presort_contributors: bool = False
    refresh: bool = False

    def __post_init__(self):
        # Raises ValueError for negative windows and windows past the calendar's start
        window_start(self.now, self.window_days)
        if self.top_n < 0:
            raise ValueError(f"top must not be negative, got {self.top_n}")
        if not 0 < self.trend_fraction <= 1:
            raise ValueError(f"trend_fraction must be in (0, 1], got {self.trend_fraction}")

    @classmethod
    def from_request_args(cls, args, config: Dict[str, Any], now: Optional[datetime] = None):
        """Parse from Flask request.args, falling back to configured defaults.

        The reference instant is the `now` query arg when given, else the
        `now` argument, else the current time. It is read exactly once here.

        Raises:
            InvalidDateError: if the `now` query arg is not a date.
            ValueError: for an unusable window, a negative contributor count or
                a trend fraction outside (0, 1].
        """
        raw_now = args.get("now")
        if raw_now:
            now = normalize_instant(raw_now)
        elif now is None:
            now = datetime.now(timezone.utc)
        return cls(
            now=now,
            window_days=args.get("window_days", config.get("window_days", 365), type=int),
            top_n=args.get("top", config.get("top_contributors", 30), type=int),
            trend_fraction=config.get("trend_fraction", 0.125),
            presort_contributors=args.get("presort", "").lower() == "true",
            refresh=args.get("refresh", "").lower() == "true",
        )
