"""Configuration constants and environment overrides."""

from __future__ import annotations

import os

# Directories are created rwx for owner and group, nothing for world.
DIR_MODE: int = 0o770
FILE_MODE: int = 0o660

TEMPLATE_SUFFIX: str = ".template"
DOT_PREFIX: str = "dot."

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# External utility used by fixture_tree.tree to print a directory listing.
TREE_COMMAND: str = os.environ.get("FIXTURE_TREE_TREE_CMD") or "tree"
