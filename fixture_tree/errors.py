"""Exceptions raised while copying a directory tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class CopyDirError(Exception):
    """Base class for every error raised by fixture_tree."""


class PreconditionError(CopyDirError):
    """Source or destination is missing or is not a directory."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path} {reason}")


class CopyIOError(CopyDirError):
    """A filesystem operation failed.

    ``op`` names the failing step (``mkdir``, ``read-dir``, ``open``, ...).
    """

    def __init__(self, op: str, path: Path, cause: object) -> None:
        self.op = op
        self.path = path
        self.cause = cause
        super().__init__(f"{op} {path}: {cause}")


class CollisionError(CopyIOError):
    """The destination file already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__("creating dst file", path, "file already exists")


class TemplateSyntaxError(CopyDirError):
    """A file name or file content could not be parsed as a template."""

    def __init__(self, what: str, path: Path, cause: object) -> None:
        self.path = path
        super().__init__(f"parsing {what} as template {path}: {cause}")


class TemplateRenderError(CopyDirError):
    """Rendering failed, typically because a referenced key is missing."""

    def __init__(self, what: str, path: Path, data: Mapping[str, str], cause: object) -> None:
        self.path = path
        self.data = dict(data)
        super().__init__(f"executing {what} {path} with data {self.data}: {cause}")


class InvalidNameError(CopyDirError):
    """A rendered file name is empty, a dot entry, or contains a path separator."""

    def __init__(self, path: Path, name: str) -> None:
        self.path = path
        self.name = name
        super().__init__(f"rendered file name {name!r} of {path} is not a plain file name")


class UsageError(CopyDirError):
    """Malformed command-line input."""
