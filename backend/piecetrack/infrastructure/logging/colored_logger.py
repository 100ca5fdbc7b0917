"""Colored pipeline logger — ANSI-colored console logging for batch jobs.

Provides a PipelineLogger with color-coded output per stage, used by the
legacy data migration so a run can be followed in the terminal.

Color scheme:
    🔵 Blue    — Users
    🟣 Magenta — Statuses
    🟡 Yellow  — Pieces
    ⚪ White   — Migration as a whole
    🔴 Red     — Errors
    ⚪ Gray    — Counts / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, NamedTuple


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Stage Definitions ────────────────────────────────────────────────

class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class PipelineStage:
    """Predefined stages with colors and icons."""

    USERS = Stage("USERS", _Colors.BLUE, "👤")
    STATUSES = Stage("STATUSES", _Colors.MAGENTA, "🏷️")
    PIECES = Stage("PIECES", _Colors.YELLOW, "📦")
    MIGRATION = Stage("MIGRATION", _Colors.WHITE, "⚙️")
    ERROR = Stage("ERROR", _Colors.RED, "❌")
    COMPLETE = Stage("COMPLETE", _Colors.GREEN, "✅")


def _suffix(fields: dict[str, Any], tone: str = _Colors.GRAY) -> str:
    if not fields:
        return ""
    joined = " | ".join(f"{k}={v}" for k, v in fields.items())
    return f" {tone}({joined}){_Colors.RESET}"


# ── PipelineLogger ───────────────────────────────────────────────────

class PipelineLogger:
    """Color-coded logger for multi-stage jobs.

    Usage:
        log = PipelineLogger("LegacyMigrationService")
        with log.timed_step(PipelineStage.USERS, "Copying users"):
            ...
        log.stats(users=12, statuses=4)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        head = f"{stage.color}{_Colors.BOLD}{stage.icon} [{stage.label}]{_Colors.RESET}"
        self._logger.info(f"{head} {stage.color}{message}{_Colors.RESET}{_suffix(fields)}")

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        head = f"{stage.color}{stage.icon} [{stage.label}]{_Colors.RESET}"
        self._logger.info(f"{head} {_Colors.GREEN}✓ {message}{_Colors.RESET}{_suffix(fields)}")

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        line = (
            f"{_Colors.RED}{_Colors.BOLD}{PipelineStage.ERROR.icon} [{stage.label}]"
            f"{_Colors.RESET} {_Colors.RED}{message}{_Colors.RESET}"
        )
        if error is not None:
            line += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(line)

    def detail(self, message: str, **fields: Any) -> None:
        """Indented, dimmed line under the current step."""
        self._logger.info(
            f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}{_suffix(fields, _Colors.DIM)}"
        )

    def separator(self, title: str = "") -> None:
        rule = f"{'─' * 10} {title} {'─' * (50 - len(title))}" if title else "─" * 60
        self._logger.info(f"{_Colors.GRAY}{rule}{_Colors.RESET}")

    def stats(self, **counts: Any) -> None:
        joined = " | ".join(f"{k}: {v}" for k, v in counts.items())
        self._logger.info(f"   {_Colors.GRAY}📈 {joined}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log start and end of a step with elapsed time; failures are logged and re-raised."""
        self.step_start(stage, message, **fields)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - start:.2f}s", error=e)
            raise
        self.step_complete(stage, f"{message} ({time.perf_counter() - start:.2f}s)")
