"""
Snowflake Identifier Codec

Packs and unpacks the three fields of a Snowflake ID into a single 64-bit
signed integer. The layout is the classic Twitter one, so identifiers stay
bit-for-bit compatible with any other component expecting it:

    |1 bit|         41 bits         |  10 bits   |  12 bits  |
    |sign |        timestamp        | machine_id | sequence  |
    | 0   | milliseconds since epoch|   0-1023   |  0-4095   |

    - Sign bit: Always 0 for identifiers built here
    - Timestamp: 41 bits = ~69.7 years of milliseconds from the epoch
    - Machine ID: 10 bits = 1024 possible machines (0-1023)
    - Sequence: 12 bits = 4096 IDs per millisecond per machine

Construction and decoding are deliberately asymmetric:
    - Constructors (create, with_*) validate every field and raise
      OutOfRangeError instead of truncating or wrapping.
    - Accessors (timestamp, machine_id, sequence) are plain shift-and-mask
      and never fail, so identifiers received from elsewhere always decode.

The empty identifier is the all-zero value. Note that it is bit-identical to
SFID.create(0, 0, 0); callers that need to tell them apart must track the
"unset" state themselves.
"""

from datetime import datetime, timedelta, timezone
from functools import total_ordering

from sfid.core.exceptions import OutOfRangeError
from sfid.utils.clock import UNIX_EPOCH_MS

TIMESTAMP_BITS = 41
MACHINE_ID_BITS = 10
SEQUENCE_BITS = 12

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1  # 0x1FFFFFFFFFF
MAX_MACHINE_ID = (1 << MACHINE_ID_BITS) - 1  # 0x3FF
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1  # 0xFFF

MACHINE_ID_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = MACHINE_ID_BITS + SEQUENCE_BITS

SEQUENCE_MASK = MAX_SEQUENCE
MACHINE_ID_MASK = MAX_MACHINE_ID << MACHINE_ID_SHIFT
TIMESTAMP_MASK = MAX_TIMESTAMP << TIMESTAMP_SHIFT

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def _check(field: str, value: int, bound: int) -> None:
    if not isinstance(value, int):
        raise TypeError(f"{field} must be an int, not {type(value).__name__}")
    if value < 0 or value > bound:
        raise OutOfRangeError(field, value, bound)


def validate_timestamp(value: int) -> None:
    _check("Timestamp", value, MAX_TIMESTAMP)


def validate_machine_id(value: int) -> None:
    _check("MachineID", value, MAX_MACHINE_ID)


def validate_sequence(value: int) -> None:
    _check("Sequence", value, MAX_SEQUENCE)


@total_ordering
class SFID:
    """An immutable Snowflake identifier backed by one 64-bit integer.

    Build instances with ``create``, ``from_int`` or ``empty``; calling the
    class directly is the same as ``from_int``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if not isinstance(value, int):
            raise TypeError(f"Value must be an int, not {type(value).__name__}")
        if value < INT64_MIN or value > INT64_MAX:
            raise OutOfRangeError("Value", value, INT64_MAX, INT64_MIN)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    @classmethod
    def create(cls, timestamp: int, machine_id: int, sequence: int) -> "SFID":
        """Packs three validated fields into a new identifier.

        Args:
            timestamp: Milliseconds since the epoch (0 to 2^41-1).
            machine_id: The generating machine (0-1023).
            sequence: The per-millisecond counter (0-4095).

        Raises:
            OutOfRangeError: If any field is outside its bound.
            TypeError: If any field is not an int.
        """
        validate_timestamp(timestamp)
        validate_machine_id(machine_id)
        validate_sequence(sequence)

        return cls(
            (timestamp << TIMESTAMP_SHIFT)
            | (machine_id << MACHINE_ID_SHIFT)
            | sequence
        )

    @classmethod
    def from_int(cls, value: int) -> "SFID":
        """Wraps a packed value received from elsewhere, without field checks."""
        return cls(value)

    @classmethod
    def empty(cls) -> "SFID":
        """Returns the all-zero "not yet assigned" identifier."""
        return cls(0)

    @property
    def timestamp(self) -> int:
        return (self._value >> TIMESTAMP_SHIFT) & MAX_TIMESTAMP

    @property
    def machine_id(self) -> int:
        return (self._value >> MACHINE_ID_SHIFT) & MAX_MACHINE_ID

    @property
    def sequence(self) -> int:
        return self._value & SEQUENCE_MASK

    @property
    def as_int(self) -> int:
        return self._value

    @property
    def is_empty(self) -> bool:
        return self._value == 0

    def with_timestamp(self, timestamp: int) -> "SFID":
        validate_timestamp(timestamp)
        return type(self)(
            (self._value & ~TIMESTAMP_MASK) | (timestamp << TIMESTAMP_SHIFT)
        )

    def with_machine_id(self, machine_id: int) -> "SFID":
        validate_machine_id(machine_id)
        return type(self)(
            (self._value & ~MACHINE_ID_MASK) | (machine_id << MACHINE_ID_SHIFT)
        )

    def with_sequence(self, sequence: int) -> "SFID":
        validate_sequence(sequence)
        return type(self)((self._value & ~SEQUENCE_MASK) | sequence)

    def to_datetime(self, epoch: int = UNIX_EPOCH_MS) -> datetime:
        """Returns the UTC instant encoded in the timestamp field.

        Args:
            epoch: The epoch the identifier was minted against, in
                milliseconds since 1970-01-01T00:00:00Z.
        """
        return datetime.fromtimestamp(0, tz=timezone.utc) + timedelta(
            milliseconds=epoch + self.timestamp
        )

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, SFID):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other):
        if not isinstance(other, SFID):
            return NotImplemented
        return self._value != other._value

    def __lt__(self, other):
        if not isinstance(other, SFID):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return (
            f"SFID(timestamp={self.timestamp}, machine_id={self.machine_id}, "
            f"sequence={self.sequence})"
        )
