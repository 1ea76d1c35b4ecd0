"""Internal error types; never surfaced by the public pipeline functions."""
from __future__ import annotations


class JobMatcherError(Exception):
    pass


class SourceError(JobMatcherError):
    """A source attempt was reachable but its content was rejected."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class NoJobsParsedError(JobMatcherError):
    pass
