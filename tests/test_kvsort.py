import os

import pytest

from advcache.kvsort import less, sort_kv


def _make_test_slice(n):
    return [(os.urandom(8), b"value") for _ in range(n)]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (b"a", b"b", True),
        (b"b", b"a", False),
        (b"a", b"a", False),
        (b"ab", b"abc", True),
        (b"abc", b"ab", False),
        (b"", b"a", True),
        (b"", b"", False),
        (b"\x00\xff", b"\x01", True),
    ],
)
def test_less(a, b, expected):
    assert less(a, b) is expected


def test_sort_random_slice_matches_byte_order():
    data = _make_test_slice(24)
    buf = list(data)
    sort_kv(buf)
    keys = [k for k, _ in buf]
    assert all(not less(keys[i + 1], keys[i]) for i in range(len(keys) - 1))
    assert sorted(buf) == sorted(data)
    assert keys == sorted(k for k, _ in data)


def test_sort_is_in_place_and_returns_same_list():
    buf = [(b"b", b"2"), (b"a", b"1")]
    result = sort_kv(buf)
    assert result is buf
    assert buf == [(b"a", b"1"), (b"b", b"2")]


def test_sort_is_stable_for_equal_keys():
    buf = [(b"k", b"first"), (b"a", b"x"), (b"k", b"second"), (b"k", b"third")]
    sort_kv(buf)
    assert buf == [(b"a", b"x"), (b"k", b"first"), (b"k", b"second"), (b"k", b"third")]


def test_sort_handles_empty_and_single():
    assert sort_kv([]) == []
    assert sort_kv([(b"only", None)]) == [(b"only", None)]


def test_sort_prefix_before_longer_key():
    buf = [(b"language", b"en"), (b"lang", b"x"), (b"la", None)]
    sort_kv(buf)
    assert [k for k, _ in buf] == [b"la", b"lang", b"language"]