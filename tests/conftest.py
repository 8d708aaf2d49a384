"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the moddocs test suite.
"""

import logging
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from moddocs.module import Input, Module, Output, Provider, Requirement

REPO_ROOT = Path(__file__).resolve().parent.parent

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (filesystem, full command runs)"
    )
    config.addinivalue_line("markers", "e2e: End-to-end tests (full CLI runs)")


def pytest_collection_modifyitems(config, items):
    """Add the 'unit' marker to tests without another category marker."""
    for item in items:
        if not any(
            mark.name in ["integration", "e2e"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Restore the global logging state after each test."""
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level
    yield
    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture(autouse=True)
def quiet_tool_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep loggers of tools created outside an App silent."""
    monkeypatch.setenv("MODDOCS_TEST_LOGGING_LEVEL", "false")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="moddocs-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def examples_dir() -> Path:
    """The example module shipped with the repository."""
    return REPO_ROOT / "examples"


@pytest.fixture
def module_dir(temp_dir: Path) -> Path:
    """A small module directory with one entry of each kind."""
    path = temp_dir / "module"
    path.mkdir()
    (path / "module.yaml").write_text(
        "header: Example module\n"
        "requirements:\n"
        "  - name: terraform\n"
        "    version: '>= 0.12'\n"
        "providers:\n"
        "  - name: aws\n"
        "    version: '>= 2.15.0'\n"
        "inputs:\n"
        "  - name: region\n"
        "    type: string\n"
        "    description: Region to deploy into.\n"
        "    default: us-east-1\n"
        "  - name: bucket_name\n"
        "    type: string\n"
        "    description: Name of the bucket.\n"
        "outputs:\n"
        "  - name: bucket_arn\n"
        "    description: ARN of the bucket.\n"
    )
    return path


@pytest.fixture
def sample_module() -> Module:
    """An in-memory module covering required, optional and map inputs."""
    return Module(
        header="Example module",
        requirements=(Requirement("terraform", ">= 0.12"),),
        providers=(
            Provider("aws", version=">= 2.15.0"),
            Provider("aws", alias="ident", version=">= 2.15.0"),
        ),
        inputs=(
            Input("bucket_name", "string", "Name of the bucket."),
            Input("region", "string", "Region to deploy into.", "us-east-1", False),
            Input("tags", "map", "", {"team": "core"}, False),
        ),
        outputs=(Output("bucket_arn", "ARN of the bucket."),),
    )
