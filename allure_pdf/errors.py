"""Errors raised while composing a report."""

from pathlib import Path


class ReportError(Exception):
    """Base class for errors reported to the operator."""


class ResultsDirectoryError(ReportError):
    """Raised when the results path is missing or is not a directory."""


class ResultParseError(ReportError):
    """Raised when a result file cannot be read or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot parse test result {path}: {reason}")
        self.path = path


class AttachmentReadError(ReportError):
    """Raised when an attachment file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read attachment {path}: {reason}")
        self.path = path
