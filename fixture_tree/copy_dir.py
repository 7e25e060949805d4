"""Recursive directory copy with directory renaming and template rendering."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from .config import DIR_MODE, FILE_MODE
from .errors import CollisionError, CopyIOError, InvalidNameError, PreconditionError
from .logger import logger
from .rename import identity_rename
from .templating import render_file_content, render_file_name

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .rename import RenameFn


def _check_is_dir(path: Path) -> None:
    try:
        st = path.stat()
    except FileNotFoundError:
        raise PreconditionError(path, "does not exist") from None
    except NotADirectoryError:
        raise PreconditionError(path, "is not a directory") from None
    except OSError as err:
        raise CopyIOError("stat", path, err) from err
    if not stat.S_ISDIR(st.st_mode):
        raise PreconditionError(path, "is not a directory")


def copy_dir(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    rename: RenameFn = identity_rename,
    tmpl_data: Mapping[str, str] | None = None,
) -> Path:
    """Recursively copy the ``src`` directory below the ``dst`` directory.

    Every directory, ``src`` included, is renamed by applying ``rename`` to
    its base name. If ``tmpl_data`` is not empty, every file is treated as a
    jinja2 template: the ``.template`` suffix is stripped from its name, the
    name itself is rendered (``foo-{{bar}}.template`` becomes ``foo-X`` when
    ``bar`` is ``X``) and so is its content.

    Both ``src`` and ``dst`` must already exist. Files are created
    exclusively: an existing destination file raises CollisionError and is
    left untouched. The first error aborts the copy.

    For example, copying ``foo`` containing ``dot.git/config`` into ``bar``
    with ``dot_rename`` produces ``bar/foo/.git/config``.

    Returns the path of the created top-level directory.
    """
    src_path = Path(src)
    dst_path = Path(dst)
    data = dict(tmpl_data or {})

    for directory in (src_path, dst_path):
        _check_is_dir(directory)

    return _copy_tree(src_path, dst_path, rename, data)


def _copy_tree(src: Path, dst: Path, rename: RenameFn, tmpl_data: dict[str, str]) -> Path:
    tgt_dir = dst / rename(src.name)
    try:
        tgt_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as err:
        raise CopyIOError("mkdir", tgt_dir, err) from err
    logger.debug("Created directory", src=str(src), dst=str(tgt_dir))

    try:
        entries = sorted(src.iterdir(), key=lambda p: p.name)
    except OSError as err:
        raise CopyIOError("read-dir", src, err) from err

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            _copy_tree(entry, tgt_dir, rename, tmpl_data)
            continue

        name = entry.name
        if tmpl_data:
            name = render_file_name(entry, tmpl_data)
            _check_plain_name(entry, name)
        _copy_file(entry, tgt_dir / name, tmpl_data)

    return tgt_dir


def _check_plain_name(src: Path, name: str) -> None:
    """Keep rendered names inside the target directory."""
    if name in ("", ".", "..") or os.sep in name or (os.altsep and os.altsep in name):
        raise InvalidNameError(src, name)


def _copy_file(src: Path, dst: Path, tmpl_data: dict[str, str]) -> None:
    try:
        st = src.stat()
    except OSError as err:
        raise CopyIOError("stat", src, err) from err
    if not stat.S_ISREG(st.st_mode):
        raise CopyIOError("file-copy", src, "not a regular file")

    if not tmpl_data:
        try:
            with src.open("rb") as src_file, _create_exclusive(dst) as dst_file:
                shutil.copyfileobj(src_file, dst_file)
        except CopyIOError:
            raise
        except OSError as err:
            raise CopyIOError("file-copy", src, err) from err
        logger.debug("Copied file", src=str(src), dst=str(dst), rendered=False)
        return

    try:
        with src.open("r", encoding="utf-8", errors="surrogateescape", newline="") as src_file:
            content = src_file.read()
    except OSError as err:
        raise CopyIOError("read", src, err) from err

    # Render before creating dst so that a failure leaves nothing behind.
    rendered = render_file_content(src, content, tmpl_data).encode("utf-8", errors="surrogateescape")
    try:
        with _create_exclusive(dst) as dst_file:
            dst_file.write(rendered)
    except CopyIOError:
        raise
    except OSError as err:
        raise CopyIOError("write", dst, err) from err
    logger.debug("Copied file", src=str(src), dst=str(dst), rendered=True)


def _create_exclusive(path: Path) -> BinaryIO:
    """Open ``path`` for writing, failing if it already exists."""
    try:
        fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
    except FileExistsError:
        raise CollisionError(path) from None
    except OSError as err:
        raise CopyIOError("creating dst file", path, err) from err
    return os.fdopen(fd, "wb")
