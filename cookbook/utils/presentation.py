"""Shared output helpers for cookbook recipe terminal presentation.

These helpers aim for:
- scan-friendly sectioning
- compact, consistent key/value rows
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gauntlet import Failure, Success

if TYPE_CHECKING:
    from typing import Any


def print_header(title: str) -> None:
    """Print recipe title underlined."""
    print(title)
    print("=" * len(title))


def print_section(title: str) -> None:
    """Print a named section heading."""
    print(f"\n{title}")
    print("-" * len(title))


def print_kv_rows(rows: list[tuple[str, object]]) -> None:
    """Print compact key/value rows using a uniform bullet style."""
    for key, value in rows:
        rendered = str(value)
        # Preserve readability for multi-line values (indent continuation lines).
        lines = rendered.splitlines() or [""]
        print(f"- {key}: {lines[0]}")
        for cont in lines[1:]:
            print(f"  {' ' * len(key)}  {cont}")


def describe_result(result: Success[Any] | Failure[Any]) -> str:
    """Render a result as a one-line ``ok: ...`` / ``err: ...`` summary."""
    match result:
        case Success(value=value):
            return f"ok: {value}"
        case Failure(error=error):
            return f"err: {getattr(error, 'message', error)}"
        case _:
            return repr(result)


def print_learning_hints(hints: list[str], *, title: str = "Next steps") -> None:
    """Print short coaching bullets that explain what to do next."""
    if not hints:
        return
    print_section(title)
    for hint in hints:
        print(f"- {hint}")
