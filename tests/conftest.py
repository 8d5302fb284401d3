"""
Pytest configuration and fixtures for autoconform tests.
"""

from __future__ import annotations

import os
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from autoconform.config import reset_config
from autoconform.hashing import default_seed


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Drop AUTOCONFORM_* overrides and the config singleton around each test."""
    original = {k: v for k, v in os.environ.items() if k.startswith("AUTOCONFORM_")}
    for key in original:
        del os.environ[key]
    reset_config()
    default_seed.cache_clear()

    yield

    reset_config()
    default_seed.cache_clear()
    for key in [k for k in os.environ if k.startswith("AUTOCONFORM_")]:
        del os.environ[key]
    os.environ.update(original)


# ============================================================================
# OTel Fixtures
# ============================================================================


@pytest.fixture
def recording_span() -> Generator[MagicMock, None, None]:
    """Patch the current span with a recording mock."""
    span = MagicMock()
    span.is_recording.return_value = True
    with patch("autoconform.otel.otel_trace") as mock_trace:
        mock_trace.get_current_span.return_value = span
        yield span
