"""
Per-request attempt state.
"""

from dataclasses import dataclass


@dataclass
class AttemptState:
    """
    Counters and timestamps for one logical request across its attempts.

    Attributes:
        attempt_count: Retries made so far (0 on the first attempt)
        first_attempt_at: Wall-clock time the first attempt started
        current_attempt_at: Wall-clock time the current attempt started
    """

    attempt_count: int = 0
    first_attempt_at: float | None = None
    current_attempt_at: float | None = None

    def start_attempt(self, now: float) -> None:
        """Record the start of an attempt."""
        self.current_attempt_at = now
        if self.attempt_count == 0:
            self.first_attempt_at = now

    def increment(self) -> int:
        """Count one more retry and return the new count."""
        self.attempt_count += 1
        return self.attempt_count

    def elapsed(self, now: float) -> float:
        """Seconds since the first attempt started."""
        if self.first_attempt_at is None:
            return 0.0
        return now - self.first_attempt_at
