"""
Tests for docs/generator.py.
"""

from datetime import date
from pathlib import Path

import pytest

from moddocs.cli import build_app
from moddocs.docs import DocsGenerator
from moddocs.exceptions import LoaderError
from moddocs.format import RenderSettings

EXPECTED_PAGES = [
    "json.md",
    "markdown-document.md",
    "markdown-table.md",
    "markdown.md",
    "pretty.md",
    "xml.md",
    "yaml.md",
]


def _root():
    app = build_app()
    app.create_args()
    return app.node()


def _generator(day=date(2006, 1, 2)) -> DocsGenerator:
    return DocsGenerator("moddocs", RenderSettings().for_docs(), today=lambda: day)


@pytest.mark.integration
class TestDocsGenerator:
    """Generate pages for the real command tree."""

    def test_pages_written(self, temp_dir: Path, module_dir: Path):
        out = temp_dir / "out"
        out.mkdir()

        written = _generator().generate(_root(), out, module_dir)

        assert sorted(p.name for p in written) == EXPECTED_PAGES
        assert sorted(p.name for p in out.iterdir()) == EXPECTED_PAGES

    def test_json_page(self, temp_dir: Path, module_dir: Path):
        _generator().generate(_root(), temp_dir, module_dir)

        page = (temp_dir / "json.md").read_text()

        assert page.startswith("## moddocs json\n\nGenerate JSON of inputs and outputs\n\n")
        assert "```shell\nmoddocs json ./examples/\n```" in page
        assert '      "header": "Example module",\n' in page
        assert "### Options inherited from parent commands" in page
        assert page.endswith("###### Auto generated by moddocs on 2-Jan-2006\n")

    def test_pretty_page_uses_no_color(self, temp_dir: Path, module_dir: Path):
        _generator().generate(_root(), temp_dir, module_dir)

        page = (temp_dir / "pretty.md").read_text()

        assert "```shell\nmoddocs pretty --no-color ./examples/\n```" in page
        assert "    input.bucket_name (required)\n" in page
        assert "\x1b[" not in page

    def test_group_page(self, temp_dir: Path, module_dir: Path):
        _generator().generate(_root(), temp_dir, module_dir)

        page = (temp_dir / "markdown.md").read_text()

        assert "moddocs markdown [-h]" not in page
        assert "### Options\n" in page
        assert "--indent N" in page
        assert "generates the following output:\n\n\n\n" in page

    def test_inherited_markdown_flags(self, temp_dir: Path, module_dir: Path):
        _generator().generate(_root(), temp_dir, module_dir)

        page = (temp_dir / "markdown-table.md").read_text()
        inherited = page.split("### Options inherited from parent commands", 1)[1]

        assert "--indent N" in inherited
        assert "--no-escape" in inherited
        assert "    ## Inputs\n" in page

    def test_runs_differ_only_in_date(self, temp_dir: Path, module_dir: Path):
        first, second = temp_dir / "a", temp_dir / "b"
        first.mkdir()
        second.mkdir()

        _generator(date(2006, 1, 2)).generate(_root(), first, module_dir)
        _generator(date(2024, 3, 15)).generate(_root(), second, module_dir)

        for name in EXPECTED_PAGES:
            a = (first / name).read_text().splitlines()
            b = (second / name).read_text().splitlines()
            assert a[:-1] == b[:-1]
            assert a[-1] == "###### Auto generated by moddocs on 2-Jan-2006"
            assert b[-1] == "###### Auto generated by moddocs on 15-Mar-2024"

    def test_model_loaded_before_writing(self, temp_dir: Path):
        out = temp_dir / "out"
        out.mkdir()

        with pytest.raises(LoaderError):
            _generator().generate(_root(), out, temp_dir / "missing")

        assert list(out.iterdir()) == []

    def test_example_module(self, temp_dir: Path, examples_dir: Path):
        written = _generator().generate(_root(), temp_dir, examples_dir)

        assert len(written) == len(EXPECTED_PAGES)
        table = (temp_dir / "markdown-table.md").read_text()
        assert "| aws.ident | >= 2.15.0 |" in table
