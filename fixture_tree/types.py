"""Validated command-line arguments."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class CopyDirArgs(BaseModel):
    model_config = ConfigDict(frozen=True)

    src_dir: Path
    dst_dir: Path
    dot: bool = False
    verbose: bool = False
    keyvals: list[str] = Field(default_factory=list)
