import pytest

from secded.bits import flip_random_bits
from secded.hamming import MessageRangeError, RecoveredMessage, UncorrectableError
from secded.store import Corrupted, Found, NotFound, decode_all, encode_all, find


def test_encode_all_in_place():
    a = [1010, 0, 620]
    assert encode_all(a) is None
    assert a == [10098, 0, 27756]


def test_encode_all_rejects_without_partial_write():
    a = [31, 2111, 312]
    with pytest.raises(MessageRangeError):
        encode_all(a)
    assert a == [31, 2111, 312]


def test_find_clean():
    a = [31, 140, 56]
    encode_all(a)
    assert a == [24735, 43276, 18616]
    assert find(a, 31) == Found(0)
    assert find(a, 56) == Found(2)
    assert find(a, 100) == NotFound()


def test_find_returns_first_match():
    a = [5, 9, 9, 5]
    encode_all(a)
    assert find(a, 9) == Found(1)


def test_find_empty():
    assert find([], 0) == NotFound()


def test_find_with_single_errors(rng):
    a = [1010, 0, 620]
    encode_all(a)
    for i in range(len(a)):
        a[i], _ = flip_random_bits(a[i], 1, rng)

    assert find(a, 620) == Found(2)
    assert find(a, 1010) == Found(0)
    assert find(a, 1) == NotFound()


def test_find_with_double_errors(rng):
    a = [63, 390, 312]
    encode_all(a)
    assert a == [49215, 41734, 58040]
    for i in range(len(a)):
        a[i], _ = flip_random_bits(a[i], 2, rng)

    assert find(a, 390) == Corrupted(0)


def test_find_stops_at_first_corrupted_entry():
    a = [7, 8, 9]
    encode_all(a)
    a[1] ^= 0b11
    # 9 would decode cleanly but sits after the bad entry
    assert find(a, 9) == Corrupted(1)
    # a match before the bad entry is still reported
    assert find(a, 7) == Found(0)


def test_find_logs_corruption(caplog):
    a = [7]
    encode_all(a)
    a[0] ^= 0b101
    with caplog.at_level('WARNING', logger='secded.store'):
        assert find(a, 7) == Corrupted(0)
    assert 'uncorrectable' in caplog.text


def test_decode_all():
    a = [1, 2]
    encode_all(a)
    a[1] ^= 0b11
    outcomes = decode_all(a)
    assert outcomes[0] == RecoveredMessage(1)
    assert isinstance(outcomes[1], UncorrectableError)


def test_not_found_and_corrupted_are_distinct():
    assert NotFound() != Corrupted(0)
    assert Found(0) != Corrupted(0)
