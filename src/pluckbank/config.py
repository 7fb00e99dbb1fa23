"""
Configuration and error handling utilities for pluckbank.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from enum import Enum
from typing import Type, Optional
from pluckbank.errors import ConfigurationError
from pluckbank.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    Error handling mode for recoverable setup problems.

    STRICT: All errors raise exceptions (default, fail-fast)
    LENIENT: Non-fatal errors become warnings, execution continues

    Buffer invariant violations are never routed through the error mode;
    they always raise.
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Module-level default error mode
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT

# Sample rate used when a caller passes sample_rate=None
DEFAULT_SAMPLE_RATE: int = 44100

_SAMPLE_RATE: float = DEFAULT_SAMPLE_RATE


def set_error_mode(mode: ErrorMode) -> None:
    """
    Set the default error mode for all pluckbank operations.

    Args:
        mode: The error mode to use
    """
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    """
    Get the current default error mode.

    Returns:
        The current error mode
    """
    return DEFAULT_ERROR_MODE


def set_sample_rate(sample_rate: float) -> None:
    """
    Set the process-wide default sample rate in Hz.

    Raises:
        ConfigurationError: If sample_rate is not positive
    """
    global _SAMPLE_RATE
    if not sample_rate > 0:
        raise ConfigurationError(f"sample_rate must be positive, got {sample_rate}")
    _SAMPLE_RATE = sample_rate


def get_sample_rate() -> float:
    """Return the process-wide default sample rate in Hz."""
    return _SAMPLE_RATE


def resolve_sample_rate(sample_rate: Optional[float]) -> float:
    """Return sample_rate, or the process default when it is None."""
    if sample_rate is None:
        return _SAMPLE_RATE
    return sample_rate


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
) -> bool:
    """
    Handle an error based on the error mode.

    In STRICT mode (or if fatal=True), raises an exception.
    In LENIENT mode (and fatal=False), logs a warning and returns True.

    Args:
        message: Error description
        fatal: If True, always raise regardless of mode
        error_mode: Override the default error mode (optional)
        exception_class: Exception type to raise (default: RuntimeError)

    Returns:
        True if operation should continue (warning was issued)

    Raises:
        exception_class: If in STRICT mode or fatal=True

    Example:
        # In strict mode, raises ConfigurationError
        # In lenient mode, logs warning and the first binding is kept
        if symbol in voices:
            if handle_error("Duplicate symbol", exception_class=ConfigurationError):
                continue

        # Always raises regardless of mode
        if not self._started:
            handle_error("Not started.", fatal=True)
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE

    if fatal or mode == ErrorMode.STRICT:
        raise exception_class(message)
    else:
        logger.warning(message)
        return True
