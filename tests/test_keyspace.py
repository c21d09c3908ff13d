import random

import pytest

from pdf_bruteforce.core.keyspace import (
    MAX_CANDIDATES,
    Keyspace,
    decode,
    encode,
    length_of,
    total_candidates,
)
from pdf_bruteforce.utils.exceptions import CapacityError, ConfigError


def test_total_candidates_sums_every_length():
    assert total_candidates(10, 4, 4) == 10_000
    assert total_candidates(10, 1, 3) == 10 + 100 + 1000
    assert total_candidates(1, 1, 5) == 5


def test_overflow_is_rejected_not_wrapped():
    with pytest.raises(CapacityError):
        total_candidates(95, 20, 20)
    with pytest.raises(OverflowError):
        total_candidates(95, 1, 20)


def test_running_sum_overflow():
    # each term fits the ceiling on its own, their sum does not
    assert total_candidates(2, 64, 64, ceiling=2 ** 64) == 2 ** 64
    with pytest.raises(CapacityError):
        total_candidates(2, 63, 64, ceiling=2 ** 64)


def test_ceiling_boundary():
    assert total_candidates(2, 63, 63) == 2 ** 63 <= MAX_CANDIDATES
    with pytest.raises(CapacityError):
        total_candidates(2, 64, 64)


@pytest.mark.parametrize("min_length,max_length", [(0, 3), (-1, 2), (5, 4)])
def test_invalid_length_range(min_length, max_length):
    with pytest.raises(ConfigError):
        total_candidates(10, min_length, max_length)


def test_empty_charset_size():
    with pytest.raises(ConfigError):
        total_candidates(0, 1, 1)


def test_length_of_walks_sub_ranges():
    assert length_of(0, 10, 1, 3) == 1
    assert length_of(9, 10, 1, 3) == 1
    assert length_of(10, 10, 1, 3) == 2
    assert length_of(109, 10, 1, 3) == 2
    assert length_of(110, 10, 1, 3) == 3
    assert length_of(1109, 10, 1, 3) == 3
    with pytest.raises(IndexError):
        length_of(1110, 10, 1, 3)


def test_decode_extremes():
    assert decode(0, "abc", 3) == "aaa"
    assert decode(3 ** 3 - 1, "abc", 3) == "ccc"
    assert decode(4242, "0123456789", 4) == "4242"
    assert decode(7, "0123456789", 4) == "0007"
    with pytest.raises(IndexError):
        decode(27, "abc", 3)


def test_decode_is_most_significant_first():
    assert decode(1, "ab", 3) == "aab"
    assert decode(4, "ab", 3) == "baa"


def test_encode_inverts_decode():
    charset = "xyz!"
    rng = random.Random(7)
    for length in range(1, 6):
        for index in rng.sample(range(len(charset) ** length), min(20, len(charset) ** length)):
            candidate = decode(index, charset, length)
            assert len(candidate) == length
            assert set(candidate) <= set(charset)
            assert encode(candidate, charset) == index


def test_encode_rejects_foreign_characters():
    with pytest.raises(ValueError):
        encode("12a", "0123456789")


def test_keyspace_global_bijection():
    keyspace = Keyspace("ab", 1, 3)
    assert keyspace.get_total_count() == 2 + 4 + 8
    passwords = [keyspace.position_to_password(i) for i in range(keyspace.total)]
    assert passwords[:6] == ["a", "b", "aa", "ab", "ba", "bb"]
    assert passwords[-1] == "bbb"
    assert len(set(passwords)) == keyspace.total
    for index, password in enumerate(passwords):
        assert keyspace.password_to_position(password) == index


def test_keyspace_locate():
    keyspace = Keyspace("0123456789", 2, 4)
    assert keyspace.locate(0) == (2, 0)
    assert keyspace.locate(99) == (2, 99)
    assert keyspace.locate(100) == (3, 0)
    assert keyspace.locate(1100) == (4, 0)
    assert keyspace.length_of(1099) == 3
    with pytest.raises(IndexError):
        keyspace.locate(keyspace.total)
    with pytest.raises(IndexError):
        keyspace.locate(-1)


def test_keyspace_single_length():
    keyspace = Keyspace("0123456789", 4, 4)
    assert keyspace.total == 10_000
    assert keyspace.position_to_password(4242) == "4242"
    assert keyspace.password_to_position("4242") == 4242


def test_keyspace_single_character_charset():
    keyspace = Keyspace("x", 1, 4)
    assert keyspace.total == 4
    assert [keyspace.position_to_password(i) for i in range(4)] == ["x", "xx", "xxx", "xxxx"]


def test_keyspace_rejects_bad_configuration():
    with pytest.raises(ConfigError):
        Keyspace("aa", 1, 2)
    with pytest.raises(ConfigError):
        Keyspace("ab", 3, 2)
    with pytest.raises(CapacityError):
        Keyspace("".join(chr(32 + i) for i in range(95)), 1, 20)


def test_password_to_position_rejects_out_of_range_length():
    keyspace = Keyspace("ab", 2, 3)
    with pytest.raises(ValueError):
        keyspace.password_to_position("a")
    with pytest.raises(ValueError):
        keyspace.password_to_position("abc!")
