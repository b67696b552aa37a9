"""Configuration: frozen Config resolved from explicit values or the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from gauntlet.errors import ConfigurationError

load_dotenv()

ENV_PREFIX = "GAUNTLET_"
_APPLY_WORKERS_ENV = f"{ENV_PREFIX}APPLY_WORKERS"
_LOG_FAILURES_ENV = f"{ENV_PREFIX}LOG_FAILURES"


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Immutable configuration for batch application.

    Fields left as *None* are resolved from ``GAUNTLET_*`` environment
    variables (after loading a ``.env`` file), then from defaults.

    Example:
        config = Config(apply_workers=4)
        results = apply(parse_record, rows, config=config)
    """

    #: Auto-resolved from ``GAUNTLET_APPLY_WORKERS`` when *None*; defaults to 1.
    apply_workers: int | None = None
    #: Auto-resolved from ``GAUNTLET_LOG_FAILURES`` when *None*; defaults to False.
    log_failures: bool | None = None

    def __post_init__(self) -> None:
        """Resolve unset fields from the environment and validate."""
        if self.apply_workers is None:
            raw = os.environ.get(_APPLY_WORKERS_ENV)
            workers: object = 1
            if raw is not None and raw.strip():
                try:
                    workers = int(raw)
                except ValueError:
                    raise ConfigurationError(
                        f"{_APPLY_WORKERS_ENV} must be an integer, got {raw!r}",
                        hint="Set it to a whole number such as 1 or 4.",
                    ) from None
            object.__setattr__(self, "apply_workers", workers)

        if self.log_failures is None:
            raw = os.environ.get(_LOG_FAILURES_ENV)
            object.__setattr__(
                self, "log_failures", _coerce_bool(raw) if raw is not None else False
            )

        if (
            not isinstance(self.apply_workers, int)
            or isinstance(self.apply_workers, bool)
            or self.apply_workers < 1
        ):
            raise ConfigurationError(
                f"apply_workers must be an integer ≥ 1, got {self.apply_workers!r}",
                hint="This controls how many inputs are transformed in parallel; 1 runs sequentially.",
            )

        if not isinstance(self.log_failures, bool):
            raise ConfigurationError(
                f"log_failures must be a bool, got {self.log_failures!r}",
                hint="Pass log_failures=True or False, or set GAUNTLET_LOG_FAILURES=1.",
            )
