import pytest

from advcache.query import (
    filter_and_sort_headers,
    filter_and_sort_queries,
    parse_filter_and_sort_query,
    parse_query,
)


def test_parse_simple_query_strips_question_mark():
    assert parse_query(b"?a=1&b=2") == [(b"a", b"1"), (b"b", b"2")]


def test_parse_accepts_str():
    assert parse_query("language=en") == [(b"language", b"en")]


def test_parse_key_without_value():
    assert parse_query(b"flag&x=1") == [(b"flag", None), (b"x", b"1")]


def test_parse_empty_segments_produce_empty_keys():
    assert parse_query(b"a&&b") == [(b"a", None), (b"", None), (b"b", None)]


def test_parse_trailing_ampersand():
    assert parse_query(b"a=1&") == [(b"a", b"1"), (b"", None)]


def test_parse_leading_ampersand_is_skipped():
    assert parse_query(b"&a=1") == [(b"a", b"1")]


def test_parse_value_keeps_further_equals_signs():
    assert parse_query(b"a=b=c") == [(b"a", b"b=c")]


def test_parse_empty_input():
    assert parse_query(b"") == []
    assert parse_query(b"???") == []


def test_parse_value_before_key_is_rejected():
    with pytest.raises(ValueError):
        parse_query(b"=abc")


def test_filter_keeps_prefixed_keys_and_sorts():
    pairs = [(b"language", b"en"), (b"choice[name]", b"betting"), (b"junk", b"1")]
    result = filter_and_sort_queries(pairs, [b"choice", b"language"])
    assert result == [(b"choice[name]", b"betting"), (b"language", b"en")]


def test_filter_with_no_allowed_keys_drops_everything():
    assert filter_and_sort_queries([(b"a", b"1")], []) == []


def test_parse_filter_and_sort_query_roundtrip():
    raw = b"?project[id]=285&domain=1x001.com&language=en&choice[name]=betting"
    result = parse_filter_and_sort_query(raw, [b"project[id]", b"domain", b"language", b"choice"])
    keys = [k for k, _ in result]
    assert keys == sorted(keys)
    assert dict(result) == dict(parse_query(raw))


def test_headers_are_case_insensitive_and_sorted():
    headers = {"accept-language": "en-US,en;q=0.9", "Accept-Encoding": "gzip, deflate, br"}
    result = filter_and_sort_headers(headers, ["Accept-Language", "Accept-Encoding"])
    assert result == [
        (b"Accept-Encoding", b"gzip, deflate, br"),
        (b"Accept-Language", b"en-US,en;q=0.9"),
    ]


def test_headers_with_empty_or_missing_values_are_skipped():
    headers = [(b"X-Empty", b""), (b"X-Set", b"v")]
    result = filter_and_sort_headers(headers, [b"X-Empty", b"X-Set", b"X-Missing"])
    assert result == [(b"X-Set", b"v")]


def test_headers_first_occurrence_wins():
    headers = [(b"X-Dup", b"one"), (b"x-dup", b"two")]
    assert filter_and_sort_headers(headers, [b"X-Dup"]) == [(b"X-Dup", b"one")]