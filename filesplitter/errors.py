"""Exceptions raised by the filesplitter engine and size parser."""
from __future__ import annotations
from pathlib import Path


class SplitterError(Exception):
    """Base class for filesplitter errors."""


class SizeParseError(SplitterError, ValueError):
    """A size string such as '100MB' could not be parsed."""

    def __init__(self, text: str):
        super().__init__(f"invalid size format: {text!r} (expected e.g. 500KB, 100MB, 1.5GB)")
        self.text = text


class PartCreateError(SplitterError):
    """An output part (or its directory) could not be created."""

    def __init__(self, path: Path, reason: OSError):
        super().__init__(f"cannot create {path}: {reason}")
        self.path = path
        self.reason = reason
