"""
SFID: compact, sortable 64-bit Snowflake identifiers.

    >>> from sfid import SFID, SnowflakeIDGenerator
    >>> generator = SnowflakeIDGenerator(machine_id=5)
    >>> sfid = generator.new_id()
    >>> sfid.machine_id
    5
"""

from sfid.core.exceptions import OutOfRangeError
from sfid.core.identifier import (
    MACHINE_ID_BITS,
    MACHINE_ID_SHIFT,
    MAX_MACHINE_ID,
    MAX_SEQUENCE,
    MAX_TIMESTAMP,
    SEQUENCE_BITS,
    SEQUENCE_MASK,
    SFID,
    TIMESTAMP_BITS,
    TIMESTAMP_SHIFT,
)
from sfid.utils.clock import DEFAULT_EPOCH, UNIX_EPOCH_MS, current_millis
from sfid.utils.machine import hostname_machine_id, random_machine_id, resolve_machine_id
from sfid.utils.sequence import SequenceGenerator
from sfid.utils.snowflake import (
    SnowflakeIDGenerator,
    get_default_generator,
    get_default_machine_id,
    new_sfid,
    set_default_generator,
    set_default_machine_id,
)

__all__ = [
    "DEFAULT_EPOCH",
    "MACHINE_ID_BITS",
    "MACHINE_ID_SHIFT",
    "MAX_MACHINE_ID",
    "MAX_SEQUENCE",
    "MAX_TIMESTAMP",
    "OutOfRangeError",
    "SEQUENCE_BITS",
    "SEQUENCE_MASK",
    "SFID",
    "SequenceGenerator",
    "SnowflakeIDGenerator",
    "TIMESTAMP_BITS",
    "TIMESTAMP_SHIFT",
    "UNIX_EPOCH_MS",
    "current_millis",
    "get_default_generator",
    "get_default_machine_id",
    "hostname_machine_id",
    "new_sfid",
    "random_machine_id",
    "resolve_machine_id",
    "set_default_generator",
    "set_default_machine_id",
]
