"""Explicit machine ID provisioning.

None of these run on import; callers (or the default generator) invoke them
when they actually need a machine ID.
"""

import socket
import uuid
import zlib
from typing import Optional

from sfid.core.identifier import MAX_MACHINE_ID, validate_machine_id
from sfid.services.logger import setup_logger

logger = setup_logger()


def random_machine_id() -> int:
    """Derives a machine ID from the first 32 bits of a fresh UUID4."""
    return uuid.uuid4().fields[0] % (MAX_MACHINE_ID + 1)


def hostname_machine_id(hostname: Optional[str] = None) -> int:
    """Derives a stable machine ID from a CRC32 of the host name."""
    if hostname is None:
        hostname = socket.gethostname()
    return zlib.crc32(hostname.encode()) & MAX_MACHINE_ID


def resolve_machine_id(configured: Optional[int] = None) -> int:
    """Returns the configured machine ID, or a random one when none is set.

    Raises:
        OutOfRangeError: If the configured value does not fit in 10 bits.
    """
    if configured is not None:
        validate_machine_id(configured)
        logger.info("Using configured machine ID %d", configured)
        return configured

    machine_id = random_machine_id()
    logger.info("No machine ID configured, generated random machine ID %d", machine_id)
    return machine_id
