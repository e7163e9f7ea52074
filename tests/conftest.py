"""Shared pytest fixtures for easekit tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

import pytest

from easekit.core.curves.registry import reset_default_registry

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Global State Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def clean_default_registry() -> Iterator[None]:
    """Discard the process-wide registry before and after the test."""
    reset_default_registry()
    yield
    reset_default_registry()
