"""
Process-wide gate serializing every translation request.

All engines and all callers share one lock, so at most one request is in
flight at any time and consecutive requests are spaced by the engine's
minimum delay. This caps throughput hard; callers must not expect field or
record translations to run in parallel.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TranslationGate:
    """Mutual-exclusion gate with a per-call pre-delay.

    One instance is meant to live for the whole process (see
    get_translation_gate); it is passed to MetadataTranslator explicitly.
    Tests construct their own instances.
    """

    def __init__(self):
        self._lock = asyncio.Lock()

    @property
    def locked(self) -> bool:
        """True while a request holds the gate."""
        return self._lock.locked()

    async def run_exclusively(self, min_delay: float,
                              operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``operation`` while holding the gate.

        Waiting for the gate and the pre-delay are both cancellable; a
        cancelled waiter never runs ``operation``. The gate is released on
        every exit path.

        Args:
            min_delay: Seconds to wait after acquiring, before the call
            operation: Zero-argument coroutine function to run

        Returns:
            Whatever ``operation`` returns
        """
        if self._lock.locked():
            logger.debug("Translation gate busy, waiting")
        async with self._lock:
            if min_delay > 0:
                await asyncio.sleep(min_delay)
            return await operation()

    async def pace(self, min_delay: float):
        """
        Wait out an engine's minimum spacing before a single request.

        Used by callers that hold the gate across several requests (retries),
        so every request sent is spaced by ``min_delay``. Cancellable.
        """
        if min_delay > 0:
            await asyncio.sleep(min_delay)


_translation_gate: Optional[TranslationGate] = None


def get_translation_gate() -> TranslationGate:
    """Return the process-wide gate, creating it on first use."""
    global _translation_gate
    if _translation_gate is None:
        _translation_gate = TranslationGate()
    return _translation_gate
