"""
Bounded immediate retry for translation calls.

Any exception other than cancellation is treated as retryable; retries are
sent back-to-back with no backoff. Once the attempts run out the last error is
re-raised as-is so callers see the real failure, not a wrapper.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from metatube_translation.config import MAX_TRANSLATION_ATTEMPTS

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AttemptResult(Generic[T]):
    """Outcome of a single attempt: either a value or the error it raised."""
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def _attempt(operation: Callable[[], Awaitable[T]]) -> AttemptResult[T]:
    """Run one attempt, capturing ordinary failures.

    CancelledError is re-raised here so it can never be mistaken for a
    retryable failure.
    """
    try:
        return AttemptResult(value=await operation())
    except asyncio.CancelledError:
        raise
    except Exception as error:
        return AttemptResult(error=error)


class RetryExecutor:
    """Runs an async operation up to ``max_attempts`` times."""

    def __init__(
        self,
        max_attempts: int = MAX_TRANSLATION_ATTEMPTS,
        log_callback: Optional[Callable[[str, str], None]] = None
    ):
        """
        Args:
            max_attempts: Default number of attempts for execute()
            log_callback: Callback for logging (log_type, message)
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.max_attempts = max_attempts
        self.log_callback = log_callback

    def _log(self, log_type: str, message: str):
        """Internal logging helper."""
        logger.debug(message)
        if self.log_callback:
            self.log_callback(log_type, message)

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        max_attempts: Optional[int] = None,
        operation_id: Optional[str] = None
    ) -> T:
        """Execute ``operation`` with retry.

        Args:
            operation: Zero-argument coroutine function
            max_attempts: Override the executor's default attempt count
            operation_id: Label used in log messages

        Returns:
            Result of the first successful attempt

        Raises:
            Exception: The last attempt's error, unchanged
            asyncio.CancelledError: Immediately, without retrying
        """
        attempts = self.max_attempts if max_attempts is None else max_attempts
        if attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {attempts}")
        op_id = operation_id or f"op_{id(operation)}"

        result: AttemptResult[Any] = AttemptResult()
        for attempt in range(1, attempts + 1):
            result = await _attempt(operation)
            if result.ok:
                if attempt > 1:
                    self._log("info", f"Operation {op_id} succeeded after {attempt} attempts")
                return result.value

            if attempt < attempts:
                self._log(
                    "warning",
                    f"Attempt {attempt}/{attempts} failed for {op_id}: "
                    f"{type(result.error).__name__}: {result.error}. Retrying..."
                )

        self._log("error", f"Retry exhausted for {op_id} after {attempts} attempts: {result.error}")
        raise result.error
