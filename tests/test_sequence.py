from concurrent.futures import ThreadPoolExecutor

import pytest

from sfid import MAX_SEQUENCE, OutOfRangeError, SequenceGenerator


def test_fresh_counter_starts_at_zero():
    assert SequenceGenerator().current == 0


def test_wraps_after_4095():
    sequence = SequenceGenerator()

    values = [sequence.next_sequence() for _ in range(MAX_SEQUENCE + 1)]

    assert values == list(range(1, MAX_SEQUENCE + 1)) + [0]
    assert sequence.next_sequence() == 1


def test_start_value_seeds_counter():
    sequence = SequenceGenerator(start=MAX_SEQUENCE)

    assert sequence.current == MAX_SEQUENCE
    assert sequence.next_sequence() == 0


@pytest.mark.parametrize("start", [-1, MAX_SEQUENCE + 1])
def test_start_value_is_validated(start):
    with pytest.raises(OutOfRangeError, match="Sequence"):
        SequenceGenerator(start=start)


def test_concurrent_callers_never_share_a_value():
    sequence = SequenceGenerator()

    with ThreadPoolExecutor(max_workers=16) as pool:
        values = list(pool.map(lambda _: sequence.next_sequence(), range(MAX_SEQUENCE + 1)))

    assert sorted(values) == list(range(MAX_SEQUENCE + 1))
    assert sequence.current == 0
