"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from kss_stubs import RecordingGenerator


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A small template tree with visible and hidden entries."""
    template = tmp_path / "template"
    (template / "assets" / "css").mkdir(parents=True)
    (template / "index.html").write_text("<html>{{ title }}</html>")
    (template / "assets" / "css" / "kss.css").write_text("body { margin: 0; }")
    (template / ".git").mkdir()
    (template / ".git" / "HEAD").write_text("ref: refs/heads/main")
    (template / ".DS_Store").write_text("junk")
    (template / "assets" / ".cache").write_text("junk")
    return template


@pytest.fixture
def generator() -> RecordingGenerator:
    """A generator that declares API 3.0 and records generate() calls."""
    return RecordingGenerator("3.0")
