"""Pytest configuration and fixtures.

Provides environment isolation and shared transforms used across the unit
tests. Environment fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from gauntlet import transform

# =============================================================================
# Shared Transforms
# =============================================================================


@transform
def parse_int(text, g):
    """Parse a base-10 integer, failing on anything else."""
    try:
        return g.ok(int(text))
    except (TypeError, ValueError):
        return g.err(f"{text!r} is not an integer")


@pytest.fixture
def int_parser():
    """Return the shared integer-parsing transform."""
    return parse_int


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_gauntlet_env(request, monkeypatch):
    """Clear GAUNTLET_* env vars so configuration starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("GAUNTLET_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def gauntlet_logs_propagate():
    """Keep gauntlet records visible to caplog."""
    logging.getLogger("gauntlet").propagate = True
