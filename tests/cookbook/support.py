"""Helpers for loading cookbook recipes by path (filenames use dashes)."""

from __future__ import annotations

from pathlib import Path
import runpy
from typing import Any

REPO_ROOT = Path(__file__).resolve().parents[2]


def load_recipe(relpath: str) -> dict[str, Any]:
    """Execute a recipe module without running its ``__main__`` block."""
    return runpy.run_path(str(REPO_ROOT / relpath), run_name="recipe_under_test")
