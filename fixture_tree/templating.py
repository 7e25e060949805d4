"""Template rendering of file names and file contents with jinja2."""

from __future__ import annotations

from typing import TYPE_CHECKING

import jinja2

from .config import TEMPLATE_SUFFIX
from .errors import TemplateRenderError, TemplateSyntaxError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

TemplateData = dict[str, str]

# Only "{{" is reserved: "{%" and "{#" occur in shell and config fixtures.
# Missing keys raise instead of rendering as empty strings.
_env = jinja2.Environment(
    block_start_string="{{%",
    block_end_string="%}}",
    comment_start_string="{{/*",
    comment_end_string="*/}}",
    autoescape=False,
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)
_crlf_env = _env.overlay(newline_sequence="\r\n")


def _render(source: str, what: str, src_path: Path, tmpl_data: Mapping[str, str]) -> str:
    env = _crlf_env if "\r\n" in source else _env
    try:
        template = env.from_string(source)
    except jinja2.TemplateSyntaxError as err:
        raise TemplateSyntaxError(what, src_path, err) from err
    try:
        return template.render(tmpl_data)
    except jinja2.TemplateError as err:
        raise TemplateRenderError(what, src_path, tmpl_data, err) from err


def render_file_name(src_path: Path, tmpl_data: Mapping[str, str]) -> str:
    """Return the destination name for ``src_path``.

    The ``.template`` suffix is stripped, then the rest of the name is
    rendered. This applies to every file name, with or without the suffix.
    """
    name = src_path.name.removesuffix(TEMPLATE_SUFFIX)
    return _render(name, "file name", src_path, tmpl_data)


def render_file_content(src_path: Path, content: str, tmpl_data: Mapping[str, str]) -> str:
    return _render(content, "template", src_path, tmpl_data)
