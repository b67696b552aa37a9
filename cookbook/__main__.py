"""Cookbook runner module.

Run cookbook recipes from a dev install. Requires ``pip install -e ".[cookbook]"``
so that ``import gauntlet`` resolves through the package manager.

Examples:
- python -m cookbook getting-started/location-view-model --hours "9:30am - 6:45pm"
- python -m cookbook getting-started.unwrap_policies -- --verbose
- python -m cookbook --list
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
import runpy
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

COOKBOOK_DIRNAME = "cookbook"
EXCLUDE_DIRS = {"utils", "__pycache__"}
START_HERE_DISPLAY = "getting-started/location-view-model.py"


@dataclass(frozen=True)
class RecipeSpec:
    """A resolved recipe: absolute path plus the name shown to users."""

    path: Path
    display: str


def cookbook_root() -> Path:
    """Return the absolute path to the cookbook directory."""
    return Path(__file__).resolve().parent


def is_recipe_file(path: Path) -> bool:
    """True if the path looks like a runnable recipe file."""
    return path.suffix == ".py" and path.name not in {"__init__.py", "__main__.py"}


def list_recipes() -> list[RecipeSpec]:
    """Discover recipe files, skipping helper directories."""
    root = cookbook_root()
    found = [
        RecipeSpec(path=path, display=path.relative_to(root).as_posix())
        for path in root.rglob("*.py")
        if is_recipe_file(path)
        and not any(part in EXCLUDE_DIRS for part in path.relative_to(root).parts)
    ]
    return sorted(found, key=lambda s: s.display)


def resolve_spec(spec: str) -> RecipeSpec:
    """Resolve a user-provided spec into a recipe.

    Accepts a path relative to the cookbook (with or without ``.py``, with or
    without a leading ``cookbook/``) or a dotted-like spec where ``.`` maps to
    ``/`` and ``_`` maps to ``-``.
    """
    root = cookbook_root()
    rel = spec.removeprefix(f"{COOKBOOK_DIRNAME}/")
    dotted = spec.replace(".", "/").replace("_", "-")
    candidates = [rel, f"{rel}.py", f"{dotted}.py"]

    for candidate in candidates:
        path = (root / candidate).resolve()
        if path.is_file() and path.is_relative_to(root) and is_recipe_file(path):
            return RecipeSpec(path=path, display=path.relative_to(root).as_posix())

    raise FileNotFoundError(
        f"Recipe not found: {spec!r}. Use --list to view available recipes."
    )


def print_recipe_list(recipes: Sequence[RecipeSpec]) -> None:
    """Print available recipes, marking the suggested starting point."""
    for recipe in recipes:
        marker = "  ← start here" if recipe.display == START_HERE_DISPLAY else ""
        print(f"  {recipe.display.removesuffix('.py')}{marker}")
    print("\n  Run:   python -m cookbook <recipe>\n")


def run_recipe(recipe: RecipeSpec, passthrough: Sequence[str]) -> int:
    """Execute the recipe in-process with ``sys.argv`` set as for a script."""
    prev_argv = list(sys.argv)
    sys.argv = [str(recipe.path), *passthrough]
    try:
        runpy.run_path(str(recipe.path), run_name="__main__")
    finally:
        sys.argv = prev_argv
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recipe named on the command line, or list recipes."""
    parser = argparse.ArgumentParser(
        prog="python -m cookbook",
        description="Gauntlet Cookbook: practical recipes for typed transformations.",
    )
    parser.add_argument("spec", nargs="?", help="Recipe to run")
    parser.add_argument("--list", action="store_true", help="List recipes and exit")

    raw = list(argv) if argv is not None else sys.argv[1:]
    if "--" in raw:
        idx = raw.index("--")
        args = parser.parse_args(raw[:idx])
        passthrough = raw[idx + 1 :]
    else:
        args, passthrough = parser.parse_known_args(raw)

    if args.list or not args.spec:
        print_recipe_list(list_recipes())
        return 0

    try:
        recipe = resolve_spec(args.spec)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    return run_recipe(recipe, passthrough)


if __name__ == "__main__":  # pragma: no cover - direct execution guard
    raise SystemExit(main())
