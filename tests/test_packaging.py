"""Tests for package discovery."""

from pathlib import Path

import pytest
from setuptools import find_namespace_packages, find_packages

PROJECT_ROOT = Path(__file__).parent.parent


class TestPackageDiscovery:
    """protrader has no __init__.py, so it is installed as a namespace package."""

    def test_regular_discovery_misses_package(self) -> None:
        """Test classic discovery finds nothing without __init__.py."""
        assert find_packages(where=str(PROJECT_ROOT), include=["protrader*"]) == []

    def test_namespace_discovery_finds_package(self) -> None:
        """Test namespace discovery picks up the package and its pages."""
        found = find_namespace_packages(where=str(PROJECT_ROOT), include=["protrader*"])
        assert "protrader" in found
        assert "protrader.pages" in found

    def test_pyproject_enables_namespaces(self) -> None:
        """Test pyproject.toml turns on namespace discovery."""
        tomllib = pytest.importorskip("tomllib")
        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            config = tomllib.load(f)

        find = config["tool"]["setuptools"]["packages"]["find"]
        assert find["include"] == ["protrader*"]
        assert find["namespaces"] is True
