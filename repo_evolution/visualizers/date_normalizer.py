"""Convert raw date encodings in project payloads to aware UTC datetimes."""

import math
from datetime import date, datetime, time, timezone
from numbers import Number

from repo_evolution.exceptions import InvalidDateError, InvalidRecordError
from repo_evolution.visualizers.models import (
    CommitPoint, ContributorStat, DailyFrequency, ProjectMetadata,
)


def normalize_instant(value):
    """Return `value` as a timezone-aware datetime in UTC.

    Accepts ISO-8601 strings (a trailing "Z", a space separator and date-only
    forms included), epoch seconds, `date` and `datetime` objects. Naive
    datetimes are read as UTC.

    Raises:
        InvalidDateError: if the value cannot be read as an instant.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    # bool is a Number too, but True is not a point in time
    if isinstance(value, Number) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, TypeError, ValueError) as e:
            raise InvalidDateError(value, str(e)) from e

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError(value, "empty string")
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidDateError(value, str(e)) from e
        return normalize_instant(parsed)

    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")


def utc_midnight(instant):
    """Truncate an instant to 00:00 UTC of its calendar day."""
    instant = normalize_instant(instant)
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def _count(record, key, whole=True):
    """Read a non-negative finite number; whole-number fields come back as int."""
    value = record.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, Number):
        raise InvalidRecordError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidRecordError(f"{key} must be finite, got {value!r}")
    if value < 0:
        raise InvalidRecordError(f"{key} must not be negative, got {value!r}")
    if value == int(value):
        return int(value)
    if whole:
        raise InvalidRecordError(f"{key} must be a whole number, got {value!r}")
    return value


def _records(records, field):
    """Yield the dict records of a payload array; null counts as empty."""
    if records is None:
        return
    if not isinstance(records, list):
        raise InvalidRecordError(f"{field} must be an array, got {type(records).__name__}")
    for r in records:
        if not isinstance(r, dict):
            raise InvalidRecordError(f"{field} entries must be objects, got {r!r}")
        yield r


def normalize_commit_data(records):
    """Build CommitPoints from raw `{commitDate, sloc, complexity}` dicts.

    The result is sorted ascending by commit instant (stable for equal
    instants). Every later step relies on that order and does not re-sort.
    """
    points = [
        CommitPoint(
            commit_instant=normalize_instant(r.get("commitDate")),
            sloc=_count(r, "sloc"),
            complexity=_count(r, "complexity", whole=False),
        )
        for r in _records(records, "commitData")
    ]
    return sorted(points, key=lambda p: p.commit_instant)


def normalize_contributor_data(records):
    """Build ContributorStats from raw `{contributor, commits}` dicts, source order kept."""
    return [
        ContributorStat(name=str(r.get("contributor", "unknown")), commit_count=_count(r, "commits"))
        for r in _records(records, "contributorData")
    ]


def normalize_commit_frequency(records):
    """Build DailyFrequency entries from raw `{day, commits}` dicts, sorted by day."""
    days = [
        DailyFrequency(day=utc_midnight(r.get("day")), commit_count=_count(r, "commits"))
        for r in _records(records, "commitFrequency")
    ]
    return sorted(days, key=lambda d: d.day)


def normalize_project_metadata(payload):
    """Normalise a raw project metadata payload without touching it.

    Args:
        payload: dict with commitData, contributorData, commitFrequency arrays;
                 missing or null arrays count as empty.

    Returns:
        ProjectMetadata

    Raises:
        InvalidDateError: for an unparseable date.
        InvalidRecordError: for malformed arrays, records or counts.
    """
    payload = payload or {}
    if not isinstance(payload, dict):
        raise InvalidRecordError(f"Metadata payload must be an object, got {type(payload).__name__}")
    return ProjectMetadata(
        commit_data=normalize_commit_data(payload.get("commitData")),
        contributor_data=normalize_contributor_data(payload.get("contributorData")),
        commit_frequency=normalize_commit_frequency(payload.get("commitFrequency")),
    )
