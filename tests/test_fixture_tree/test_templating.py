"""Tests for file name and file content rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from fixture_tree.errors import TemplateRenderError, TemplateSyntaxError
from fixture_tree.templating import render_file_content, render_file_name


class TestRenderFileName:
    def test_strips_suffix_and_renders(self) -> None:
        assert render_file_name(Path("src/foo-{{bar}}.template"), {"bar": "X"}) == "foo-X"

    def test_renders_name_without_suffix(self) -> None:
        assert render_file_name(Path("src/{{bar}}.txt"), {"bar": "X"}) == "X.txt"

    def test_plain_name_is_unchanged(self) -> None:
        assert render_file_name(Path("README.md"), {"bar": "X"}) == "README.md"

    def test_suffix_only_stripped_at_end(self) -> None:
        assert render_file_name(Path("a.template.txt"), {"k": "v"}) == "a.template.txt"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(TemplateRenderError) as exc_info:
            render_file_name(Path("foo-{{nope}}.template"), {"bar": "X"})
        assert "foo-{{nope}}.template" in str(exc_info.value)
        assert exc_info.value.data == {"bar": "X"}

    def test_malformed_placeholder_raises(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            render_file_name(Path("foo-{{bar.template"), {"bar": "X"})


class TestRenderFileContent:
    def test_substitutes_values(self) -> None:
        out = render_file_content(Path("f"), "hello {{bar}}", {"bar": "X"})
        assert out == "hello X"

    def test_accepts_spaced_placeholders(self) -> None:
        out = render_file_content(Path("f"), "{{ a }}-{{ b }}", {"a": "1", "b": "2"})
        assert out == "1-2"

    def test_keeps_trailing_newline(self) -> None:
        assert render_file_content(Path("f"), "x={{k}}\n", {"k": "v"}) == "x=v\n"

    def test_does_not_escape_html(self) -> None:
        out = render_file_content(Path("f"), "{{k}}", {"k": "<a & b>"})
        assert out == "<a & b>"

    def test_missing_key_raises_with_path_and_data(self) -> None:
        with pytest.raises(TemplateRenderError) as exc_info:
            render_file_content(Path("dir/conf"), "url = {{url}}", {"bar": "X"})
        message = str(exc_info.value)
        assert "dir/conf" in message
        assert "'bar': 'X'" in message

    def test_syntax_error_names_path(self) -> None:
        with pytest.raises(TemplateSyntaxError) as exc_info:
            render_file_content(Path("dir/conf"), "{{% if %}}", {"bar": "X"})
        assert exc_info.value.path == Path("dir/conf")

    def test_keeps_crlf_line_endings(self) -> None:
        out = render_file_content(Path("run.bat"), "echo {{k}}\r\nrem x\r\n", {"k": "v"})
        assert out == "echo v\r\nrem x\r\n"

    def test_keeps_lf_line_endings(self) -> None:
        assert render_file_content(Path("f"), "a={{k}}\nb\n", {"k": "v"}) == "a=v\nb\n"

    def test_single_brace_percent_and_hash_pass_through(self) -> None:
        source = 'n=${#arr[@]} printf "{%d}" {# x #} {{k}}\n'
        out = render_file_content(Path("script.sh"), source, {"k": "v"})
        assert out == 'n=${#arr[@]} printf "{%d}" {# x #} v\n'

    def test_block_and_comment_delimiters(self) -> None:
        source = "{{% if k == 'v' %}}yes{{% endif %}}{{/* dropped */}}"
        assert render_file_content(Path("f"), source, {"k": "v"}) == "yes"
