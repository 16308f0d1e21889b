"""
Snowflake ID Generator Module

Mints new SFID values from the current time, a machine ID and a sequence
counter. Each SnowflakeIDGenerator owns its own machine ID slot, sequence
counter and clock, so several isolated generators can live in one process
(handy in tests); a lazily built process-wide default is offered on top for
the common single-generator case.

Thread Safety:
    - new_id() runs under the generator lock, so concurrent callers never
      share a (machine_id, sequence) pair within one millisecond as long as
      no more than 4,096 IDs are requested in it
    - The machine ID slot is read and written under the same lock

Clock Considerations:
    - Timestamps count milliseconds from the configured epoch (the Unix epoch
      by default); changing the epoch breaks ordering against earlier IDs
    - A clock reading before the epoch, or more than 2^41-1 ms after it,
      raises OutOfRangeError; the sequence is not advanced in that case
    - By default the sequence wraps without waiting for the next millisecond,
      so more than 4,096 IDs in one millisecond can collide. Pass
      wait_on_overflow=True to spin until the clock moves on instead
"""

import threading
from typing import Callable, Optional

from sfid.core.config import Settings, load_settings
from sfid.core.exceptions import OutOfRangeError
from sfid.core.identifier import (
    MAX_SEQUENCE,
    SFID,
    validate_machine_id,
    validate_timestamp,
)
from sfid.services.logger import setup_logger
from sfid.utils.clock import DEFAULT_EPOCH, current_millis
from sfid.utils.machine import resolve_machine_id
from sfid.utils.sequence import SequenceGenerator

logger = setup_logger()


class SnowflakeIDGenerator:
    """A thread-safe factory for new SFID values.

    Attributes:
        epoch: The custom epoch timestamp in milliseconds since 1970-01-01 UTC.
        wait_on_overflow: Whether to wait for the next millisecond once 4,096
            IDs have been minted in the current one.
    """

    def __init__(
        self,
        machine_id: int,
        epoch: int = DEFAULT_EPOCH,
        clock: Callable[[], int] = current_millis,
        sequence: Optional[SequenceGenerator] = None,
        wait_on_overflow: bool = False,
    ):
        """Initializes a new Snowflake ID generator instance.

        Args:
            machine_id: A unique identifier for this machine (0-1023).
            epoch: The custom epoch timestamp in milliseconds.
            clock: Returns the current UTC time in ms since the Unix epoch.
            sequence: The counter to draw sequence values from.
            wait_on_overflow: Spin until the clock advances instead of
                reusing sequence values within one millisecond.

        Raises:
            OutOfRangeError: If the machine_id is outside the valid range.
        """
        validate_machine_id(machine_id)

        self.epoch = epoch
        self.wait_on_overflow = wait_on_overflow
        self._machine_id = machine_id
        self._clock = clock
        self._sequence = sequence if sequence is not None else SequenceGenerator()
        self._lock = threading.Lock()
        self._last_timestamp = -1
        self._issued_in_millis = 0

        logger.info(
            "Created Snowflake ID generator (machine_id=%d, epoch=%d, wait_on_overflow=%s)",
            machine_id,
            epoch,
            wait_on_overflow,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SnowflakeIDGenerator":
        setup_logger(level=settings.LOG_LEVEL)
        return cls(
            machine_id=resolve_machine_id(settings.MACHINE_ID),
            epoch=settings.EPOCH,
            wait_on_overflow=settings.WAIT_ON_OVERFLOW,
        )

    @property
    def machine_id(self) -> int:
        with self._lock:
            return self._machine_id

    @machine_id.setter
    def machine_id(self, value: int) -> None:
        validate_machine_id(value)
        with self._lock:
            old, self._machine_id = self._machine_id, value
        logger.info("Machine ID changed from %d to %d", old, value)

    @property
    def sequence(self) -> SequenceGenerator:
        return self._sequence

    def _current_timestamp(self) -> int:
        return self._clock() - self.epoch

    def _checked_timestamp(self, timestamp: int) -> int:
        try:
            validate_timestamp(timestamp)
        except OutOfRangeError as e:
            logger.error("Cannot generate ID: %s", e)
            raise
        return timestamp

    def _wait_for_next_millis(self, last_timestamp: int) -> int:
        """Waits until the clock moves past last_timestamp.

        Args:
            last_timestamp: The timestamp of the last generated ID.

        Returns:
            The next millisecond timestamp.
        """
        logger.warning(
            "Sequence exhausted within millisecond %d, waiting for the clock",
            last_timestamp,
        )
        timestamp = self._current_timestamp()
        while timestamp <= last_timestamp:
            timestamp = self._current_timestamp()
        return timestamp

    def new_id(self) -> SFID:
        """Generates a new Snowflake ID.

        Returns:
            A new SFID stamped with the current time.

        Raises:
            OutOfRangeError: If the clock is before the epoch or more than
                2^41-1 milliseconds past it.
        """
        with self._lock:
            timestamp = self._checked_timestamp(self._current_timestamp())

            if self.wait_on_overflow:
                if timestamp == self._last_timestamp:
                    self._issued_in_millis += 1
                    if self._issued_in_millis > MAX_SEQUENCE + 1:
                        timestamp = self._checked_timestamp(
                            self._wait_for_next_millis(self._last_timestamp)
                        )
                        self._issued_in_millis = 1
                else:
                    self._issued_in_millis = 1
                self._last_timestamp = timestamp

            sequence = self._sequence.next_sequence()
            if sequence == 0:
                logger.debug("Sequence wrapped at timestamp %d", timestamp)

            return SFID.create(timestamp, self._machine_id, sequence)


_default_generator: Optional[SnowflakeIDGenerator] = None
_default_lock = threading.Lock()


def get_default_generator() -> SnowflakeIDGenerator:
    """Returns the process-wide generator, building it from settings on first use."""
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = SnowflakeIDGenerator.from_settings(load_settings())
        return _default_generator


def set_default_generator(generator: Optional[SnowflakeIDGenerator]) -> None:
    """Replaces the process-wide generator; None rebuilds it on next use."""
    global _default_generator
    with _default_lock:
        _default_generator = generator


def get_default_machine_id() -> int:
    return get_default_generator().machine_id


def set_default_machine_id(value: int) -> None:
    get_default_generator().machine_id = value


def new_sfid() -> SFID:
    """Mints an identifier from the process-wide generator."""
    return get_default_generator().new_id()
