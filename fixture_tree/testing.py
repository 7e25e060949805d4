"""Helpers for using fixture_tree from pytest tests."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from .copy_dir import copy_dir
from .errors import CopyDirError
from .rename import identity_rename
from .tree import log_tree

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .rename import RenameFn


@contextlib.contextmanager
def chdir(directory: str | os.PathLike[str]) -> Iterator[Path]:
    """Change the working directory, restoring the previous one on exit."""
    previous = Path.cwd()
    os.chdir(directory)
    try:
        yield Path.cwd()
    finally:
        os.chdir(previous)


def copy_dir_or_fail(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    rename: RenameFn = identity_rename,
    tmpl_data: Mapping[str, str] | None = None,
) -> Path:
    """Like copy_dir, but fails the current test on error."""
    try:
        return copy_dir(src, dst, rename, tmpl_data)
    except CopyDirError as err:
        pytest.fail(f"copy_dir: {err}")


def log_tree_or_fail(directory: str | os.PathLike[str]) -> str:
    """Like log_tree, but fails the current test on error."""
    try:
        return log_tree(directory)
    except CopyDirError as err:
        pytest.fail(f"tree: {err}")
