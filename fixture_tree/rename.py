"""Directory rename policies passed to copy_dir."""

from __future__ import annotations

from collections.abc import Callable

from .config import DOT_PREFIX

RenameFn = Callable[[str], str]


def dot_rename(name: str) -> str:
    """Replace the first ``dot.`` in ``name`` with ``.``.

    ``dot.git`` becomes ``.git``. Lets a fixture tree store a git repository
    as ``dot.git`` without git treating it as a nested repository.
    """
    return name.replace(DOT_PREFIX, ".", 1)


def identity_rename(name: str) -> str:
    """Return ``name`` unchanged."""
    return name
