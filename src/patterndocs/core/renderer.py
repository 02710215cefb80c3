"""Markdown rendering of topic documents.

Thin wrapper around mistune. Takes a document path relative to the
documentation root and produces HTML, or raises FileNotFoundError.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import mistune

logger = logging.getLogger(__name__)

H1_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)

MARKDOWN_PLUGINS = ["table", "strikethrough", "task_lists", "url"]


@dataclass
class RenderResult:
    """Result of rendering a markdown document."""

    html: str
    title: str | None
    source_path: Path


class MarkdownRenderer:
    """Renders markdown documents found under a root directory.

    Every call reads the source file again. Nothing is cached, so edits to a
    document show up on the next render.
    """

    def __init__(self, root_dir: Path, *, extract_title: bool = True) -> None:
        """Initialize renderer.

        Args:
            root_dir: Directory that document paths are resolved against
            extract_title: Whether to extract title from first H1
        """
        self._root_dir = root_dir
        self._extract_title = extract_title
        self._markdown = mistune.create_markdown(plugins=MARKDOWN_PLUGINS)

    @property
    def root_dir(self) -> Path:
        """Directory that document paths are resolved against."""
        return self._root_dir

    def render(self, document_path: str) -> RenderResult:
        """Render a markdown document.

        Args:
            document_path: Path relative to root_dir, e.g. "assets/observer.md"

        Returns:
            RenderResult with HTML and title

        Raises:
            FileNotFoundError: If the document doesn't exist or lies outside root_dir
        """
        source_path = self.resolve(document_path)
        logger.debug(f"Rendering {document_path} from {source_path}")

        markdown_text = source_path.read_text(encoding="utf-8")
        html = self._markdown(markdown_text)
        if not isinstance(html, str):
            raise TypeError("mistune renderer did not produce HTML")

        title = _extract_title(markdown_text) if self._extract_title else None
        return RenderResult(html=html, title=title, source_path=source_path)

    def resolve(self, document_path: str) -> Path:
        """Resolve document path to an existing source file.

        Args:
            document_path: Path relative to root_dir

        Returns:
            Absolute path to the source file

        Raises:
            FileNotFoundError: If the document doesn't exist or lies outside root_dir
        """
        root = self._root_dir.resolve()
        source_path = (root / document_path).resolve()

        if not source_path.is_relative_to(root):
            logger.warning(f"Rejected document path outside root: {document_path}")
            raise FileNotFoundError(f"Document not found: {document_path}")

        if not source_path.is_file():
            raise FileNotFoundError(f"Document not found: {document_path}")

        return source_path


def _extract_title(markdown_text: str) -> str | None:
    match = H1_PATTERN.search(markdown_text)
    if match is None:
        return None
    return match.group(1)
