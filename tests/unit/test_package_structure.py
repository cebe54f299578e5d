"""Smoke tests for package structure and basic contracts.

These tests run in pre-commit hooks to catch structural issues quickly.
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import pytest

import bracket_picks


@pytest.mark.smoke
def test_package_metadata_accessible() -> None:
    """Verify package metadata is registered and matches the package.

    This smoke test catches:
    - Build/install configuration issues
    - Missing pyproject.toml metadata
    - Package name mismatches (bracket-picks vs bracket_picks)
    """
    version = importlib.metadata.version("bracket-picks")
    assert version == bracket_picks.__version__


@pytest.mark.smoke
def test_src_directory_structure() -> None:
    """Verify the expected src/ layout exists."""
    project_root = Path(__file__).parent.parent.parent
    src_dir = project_root / "src" / "bracket_picks"
    assert src_dir.is_dir(), f"Package directory not found: {src_dir}"
    for sub in ("bracket", "evaluation", "ingest", "cli", "utils"):
        assert (src_dir / sub / "__init__.py").exists(), f"Missing subpackage: {sub}"
