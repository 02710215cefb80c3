"""Tests for markdown rendering."""

from pathlib import Path

import pytest

from patterndocs.core.renderer import MarkdownRenderer


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer.render()."""

    def test__existing_document__returns_html(self, root_dir: Path) -> None:
        renderer = MarkdownRenderer(root_dir)

        result = renderer.render("assets/factory-method.md")

        assert "<h1>Factory Method</h1>" in result.html
        assert "<p>Define an interface for creating an object.</p>" in result.html
        assert result.title == "Factory Method"
        assert result.source_path == (root_dir / "assets" / "factory-method.md").resolve()

    def test__missing_document__raises_file_not_found(self, root_dir: Path) -> None:
        renderer = MarkdownRenderer(root_dir)

        with pytest.raises(FileNotFoundError, match="Document not found"):
            renderer.render("assets/does-not-exist.md")

    def test__path_outside_root__raises_file_not_found(self, root_dir: Path) -> None:
        """Paths escaping the documentation root are treated as missing."""
        (root_dir.parent / "secret.md").write_text("# Secret")
        renderer = MarkdownRenderer(root_dir)

        with pytest.raises(FileNotFoundError):
            renderer.render("assets/../../secret.md")

    def test__directory__raises_file_not_found(self, root_dir: Path) -> None:
        (root_dir / "assets" / "folder.md").mkdir()
        renderer = MarkdownRenderer(root_dir)

        with pytest.raises(FileNotFoundError):
            renderer.render("assets/folder.md")

    def test__edit_between_renders__is_picked_up(self, root_dir: Path) -> None:
        """Documents are read again on every render."""
        renderer = MarkdownRenderer(root_dir)
        renderer.render("assets/observer.md")

        (root_dir / "assets" / "observer.md").write_text("# Observer v2\n")
        result = renderer.render("assets/observer.md")

        assert result.title == "Observer v2"

    def test__gfm_table__is_rendered(self, root_dir: Path) -> None:
        (root_dir / "assets" / "table.md").write_text(
            "| Role | Class |\n| --- | --- |\n| Subject | Clock |\n"
        )
        renderer = MarkdownRenderer(root_dir)

        result = renderer.render("assets/table.md")

        assert "<table>" in result.html
        assert "<td>Clock</td>" in result.html

    def test__no_h1__title_is_none(self, root_dir: Path) -> None:
        (root_dir / "assets" / "plain.md").write_text("Just text.\n\n## Section\n")
        renderer = MarkdownRenderer(root_dir)

        assert renderer.render("assets/plain.md").title is None

    def test__extract_title_disabled__title_is_none(self, root_dir: Path) -> None:
        renderer = MarkdownRenderer(root_dir, extract_title=False)

        assert renderer.render("assets/observer.md").title is None
