"""Print a directory tree for diagnostics."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from .config import TREE_COMMAND
from .errors import CopyIOError
from .logger import logger


def log_tree(directory: str | os.PathLike[str]) -> str:
    """Run ``tree -a`` on ``directory``, log its output and return it."""
    path = Path(directory)
    try:
        result = subprocess.run(
            [TREE_COMMAND, "-a", str(path)],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as err:
        raise CopyIOError("tree", path, err) from err

    logger.info("Directory tree", directory=str(path), tree="\n" + result.stdout)
    return result.stdout
