"""Latest allocation result and advisory report, guarded against stale updates."""

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from models.advisory import AdvisoryReport
from models.allocation import AllocationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotSnapshot:
    result: Optional[AllocationResult]
    advisory: Optional[AdvisoryReport]
    error: Optional[str]
    generation: int


class ResultSlot:
    """Holds the current result and its advisory report behind one lock.

    Every published result bumps the generation. An advisory report is only
    attached if it was requested for the generation that is still current, so a
    slow reply for an older distribution can never overwrite newer state.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._result: Optional[AllocationResult] = None
        self._advisory: Optional[AdvisoryReport] = None
        self._error: Optional[str] = None
        self._generation = 0

    def publish(self, result: AllocationResult) -> int:
        with self._lock:
            self._generation += 1
            self._result = result
            self._advisory = None
            self._error = None
            return self._generation

    def reject(self, error: str) -> None:
        """Record an allocation failure; the last valid result stays in place."""
        with self._lock:
            self._error = error

    def begin_advisory(self) -> Tuple[int, Optional[AllocationResult]]:
        with self._lock:
            return self._generation, self._result

    def attach_advisory(self, generation: int, report: AdvisoryReport) -> bool:
        with self._lock:
            if generation != self._generation or self._result is None:
                logger.info(
                    "Discarding stale advisory report (requested for generation %d, current %d)",
                    generation, self._generation,
                )
                return False
            self._advisory = report
            return True

    def snapshot(self) -> SlotSnapshot:
        with self._lock:
            return SlotSnapshot(
                result=self._result,
                advisory=self._advisory,
                error=self._error,
                generation=self._generation,
            )
