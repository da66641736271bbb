"""
Centralized error handling for the battle engine.

Defines the exception hierarchy raised by the simulator and the error handler
that records non-fatal problems (skipped actions, defaulted input) so they can
be inspected after a run.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Enumeration of error severity levels for the engine's error handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class GameError:
    """Represents a recorded error with severity, context, and optional exception."""

    message: str
    severity: ErrorSeverity
    context: dict[str, Any] = field(default_factory=dict)
    exception: Exception | None = None


class GameException(Exception):
    """Base class for every exception raised by the simulator."""


class RosterValidationError(GameException, ValueError):
    """Raised when unit or skill input data cannot be turned into a unit."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        if self.errors:
            message = f"{message}: {'; '.join(self.errors)}"
        super().__init__(message)


class TargetPoolEmpty(GameException):
    """Raised when no valid target is left for an action."""


class RunFinishedError(GameException):
    """Raised when advancing a dungeon run that already reached victory or defeat."""


class ErrorHandler:
    """Keeps a history of handled errors and routes them to the logger."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("simulator.errors")
        self.error_history: list[GameError] = []

    def handle(
        self,
        message: str,
        severity: ErrorSeverity,
        context: dict[str, Any] | None = None,
        exception: Exception | None = None,
    ) -> GameError:
        """
        Records an error and logs it at the level matching its severity.

        Args:
            message (str):
                Human-readable description of the problem.
            severity (ErrorSeverity):
                How serious the problem is.
            context (dict[str, Any] | None):
                Optional key/value context appended to the log line.
            exception (Exception | None):
                The exception that caused the problem, if any.

        Returns:
            GameError:
                The recorded error.

        """
        error = GameError(
            message=message,
            severity=severity,
            context=context or {},
            exception=exception,
        )
        self.error_history.append(error)

        if error.context:
            context_str = " ".join(f"{k}={v}" for k, v in error.context.items())
            message = f"{message} [{context_str}]"

        if severity == ErrorSeverity.CRITICAL:
            self.logger.critical(message, exc_info=exception)
        elif severity == ErrorSeverity.HIGH:
            self.logger.error(message)
        elif severity == ErrorSeverity.MEDIUM:
            self.logger.warning(message)
        else:
            self.logger.info(message)
        return error

    def errors_of(self, severity: ErrorSeverity) -> list[GameError]:
        """Returns the recorded errors with the given severity."""
        return [error for error in self.error_history if error.severity == severity]

    def clear(self) -> None:
        self.error_history.clear()


# Global error handler instance
ERROR_HANDLER = ErrorHandler()


def report_skip(
    message: str,
    context: dict[str, Any] | None = None,
    exception: Exception | None = None,
) -> GameError:
    """Records a skipped engine step, which is never fatal."""
    return ERROR_HANDLER.handle(message, ErrorSeverity.MEDIUM, context, exception)


def report_invalid_input(
    message: str,
    context: dict[str, Any] | None = None,
    exception: Exception | None = None,
) -> GameError:
    """Records rejected input data before the caller raises."""
    return ERROR_HANDLER.handle(message, ErrorSeverity.HIGH, context, exception)
