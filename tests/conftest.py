"""Shared test fixtures."""

from pathlib import Path

import pytest

from patterndocs.config import Config, DocsConfig, LiveReloadConfig, ServerConfig


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Create a documentation root with a few topic documents."""
    root = tmp_path / "site"
    assets = root / "assets"
    assets.mkdir(parents=True)
    (assets / "factory-method.md").write_text(
        "# Factory Method\n\nDefine an interface for creating an object.\n"
    )
    (assets / "observer.md").write_text(
        "# Observer\n\nNotify dependents of state changes.\n\n## Structure\n\nSubject and observers.\n"
    )
    return root


@pytest.fixture
def test_config(root_dir: Path) -> Config:
    """Create a test configuration pointing at root_dir, live reload off."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(root_dir=root_dir),
        live_reload=LiveReloadConfig(enabled=False),
    )
