"""Shared fixtures for fixture_tree tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def work_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory with empty ``src`` and ``dst`` and chdir into it."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    (tmp_path / "dst").mkdir()
    return tmp_path


def write_files(root: Path, files: dict[str, str | bytes]) -> None:
    """Create ``files`` below ``root``; keys are slash-separated relative paths."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            full_path.write_bytes(content)
        else:
            full_path.write_text(content, encoding="utf-8")


def list_tree(root: Path) -> list[str]:
    """Return the sorted slash-separated relative paths of everything below ``root``."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))
