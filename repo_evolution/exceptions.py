"""Error types raised by the commit-history pipeline and the metadata loader."""


class PipelineError(Exception):
    """Base class for failures while shaping commit history into chart data."""


class InvalidDateError(PipelineError, ValueError):
    """A date-bearing field could not be parsed into an instant."""

    def __init__(self, value, reason=None):
        self.value = value
        message = f"Invalid date value: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidRecordError(PipelineError, ValueError):
    """A numeric field of a commit, contributor or frequency record is malformed."""


class EmptyWindowError(PipelineError):
    """The calendar window holds no days, so no anchor date exists."""


class EmptyDatasetError(PipelineError):
    """An operation that needs at least one element got an empty series."""


class ProjectNotFoundError(LookupError):
    """The metadata source has no analysis for the requested project."""

    def __init__(self, project):
        self.project = project
        super().__init__(f"Project not found: {project}")
