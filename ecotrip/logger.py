from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, TextIO


class LoggingMode(str, Enum):
    """Supported diagnostic verbosity for emission estimates."""

    NONE = "none"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    @classmethod
    def from_value(cls, value: LoggingMode | str | None) -> LoggingMode:
        """Normalize arbitrary user input into a `LoggingMode`."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        try:
            return cls(value.lower())
        except ValueError as exc:
            valid = ", ".join(mode.value for mode in cls)
            msg = f"Invalid logging mode: {value!r}. Expected one of {{{valid}}}."
            raise ValueError(msg) from exc


@dataclass(slots=True)
class Logger:
    """Minimal logger that emits deterministic diagnostics for bad inputs."""

    mode: LoggingMode = LoggingMode.WARNING
    stream: TextIO | None = None

    @property
    def is_warning_enabled(self) -> bool:  # noqa: D102
        return self.mode is not LoggingMode.NONE

    @property
    def is_info_enabled(self) -> bool:  # noqa: D102
        return self.mode in (LoggingMode.INFO, LoggingMode.DEBUG)

    @property
    def is_debug_enabled(self) -> bool:  # noqa: D102
        return self.mode is LoggingMode.DEBUG

    def warning(self, message: str, **context: Any) -> None:  # noqa: ANN401, D102
        if self.is_warning_enabled:
            self._emit("WARNING", message, context)

    def info(self, message: str, **context: Any) -> None:  # noqa: ANN401, D102
        if self.is_info_enabled:
            self._emit("INFO", message, context)

    def debug(self, message: str, **context: Any) -> None:  # noqa: ANN401, D102
        if self.is_debug_enabled:
            self._emit("DEBUG", message, context)

    def _emit(self, level: str, message: str, context: dict[str, Any]) -> None:
        parts = [f"[{level}]\t{message}"]
        extras = "\t".join(
            f"{key}={value}" for key, value in context.items() if value is not None
        )
        if extras:
            parts.append(extras)
        print("\t".join(parts), file=self.stream or sys.stderr)


DEFAULT_LOGGER = Logger()
