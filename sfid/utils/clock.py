"""Wall-clock source for identifier timestamps."""

import time

UNIX_EPOCH_MS = 0  # 1970-01-01T00:00:00Z
DEFAULT_EPOCH = UNIX_EPOCH_MS


def current_millis() -> int:
    """Returns the current UTC time in milliseconds since the Unix epoch."""
    return int(time.time() * 1000)
