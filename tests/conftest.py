"""Shared fixtures for memory tests."""

import pytest

from mcp_companion.scaffold import initialize


@pytest.fixture
def project(tmp_path):
    """An empty project directory with a recognisable name."""
    root = tmp_path / "demo-app"
    root.mkdir()
    return root


@pytest.fixture
def initialized_project(project):
    """A project on which setup has already run."""
    result = initialize(project)
    assert result.ok
    return project


@pytest.fixture
def memory_path(initialized_project):
    return initialized_project / ".mcp" / "ai_memory.json"
