import threading

from sfid.core.identifier import MAX_SEQUENCE, validate_sequence


class SequenceGenerator:
    """A thread-safe wrapping counter for the low 12 bits of an identifier.

    The counter is advanced before it is read, so a fresh generator hands out
    1, 2, ..., 4095, 0, 1, ... It never looks at the clock and never blocks.
    """

    def __init__(self, start: int = 0):
        validate_sequence(start)
        self._value = start
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """The value handed out by the last call (the start value before any)."""
        with self._lock:
            return self._value

    def next_sequence(self) -> int:
        """Advances the counter, wrapping to 0 past 4095, and returns it."""
        with self._lock:
            self._value += 1
            if self._value > MAX_SEQUENCE:
                self._value = 0
            return self._value
