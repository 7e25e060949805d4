"""Copy fixture directory trees with directory renaming and template rendering."""

from __future__ import annotations

from .config import DIR_MODE, DOT_PREFIX, FILE_MODE, TEMPLATE_SUFFIX
from .copy_dir import copy_dir
from .errors import (
    CollisionError,
    CopyDirError,
    CopyIOError,
    InvalidNameError,
    PreconditionError,
    TemplateRenderError,
    TemplateSyntaxError,
    UsageError,
)
from .rename import RenameFn, dot_rename, identity_rename
from .templating import TemplateData, render_file_content, render_file_name
from .tree import log_tree

__all__ = [
    # config
    "DIR_MODE",
    "DOT_PREFIX",
    "FILE_MODE",
    "TEMPLATE_SUFFIX",
    # copy_dir
    "copy_dir",
    # errors
    "CollisionError",
    "CopyDirError",
    "CopyIOError",
    "InvalidNameError",
    "PreconditionError",
    "TemplateRenderError",
    "TemplateSyntaxError",
    "UsageError",
    # rename
    "RenameFn",
    "dot_rename",
    "identity_rename",
    # templating
    "TemplateData",
    "render_file_content",
    "render_file_name",
    # tree
    "log_tree",
]
