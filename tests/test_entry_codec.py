import pytest

from advcache.entry_codec import EntryRecord, same_fingerprint


def _record(**overrides):
    fields = dict(
        rule_path=b"/api/v2/pagedata",
        key=2**64 - 1,
        shard=1024,
        fingerprint=bytes(range(16)),
        refreshed_at=1_700_000_000_000_000_000,
        payload=b"payload-bytes",
    )
    fields.update(overrides)
    return EntryRecord(**fields)


def test_round_trip():
    record = _record()
    assert EntryRecord.from_bytes(record.to_bytes()) == record


def test_round_trip_negative_timestamp_and_empty_payload():
    record = _record(refreshed_at=-5, payload=b"")
    assert EntryRecord.from_bytes(record.to_bytes()) == record


def test_encoding_starts_with_rule_path_and_ends_with_payload():
    record = _record(rule_path=b"/p", payload=b"xyz")
    data = record.to_bytes()
    assert data.startswith(b"\x02\x00\x00\x00/p")
    assert data.endswith(b"\x03\x00\x00\x00xyz")


def test_fingerprint_length_is_checked():
    with pytest.raises(ValueError):
        _record(fingerprint=b"short")


def test_key_range_is_checked():
    with pytest.raises(ValueError):
        _record(key=2**64)


def test_truncated_data_raises():
    data = _record().to_bytes()
    with pytest.raises(ValueError):
        EntryRecord.from_bytes(data[:-1])


def test_same_fingerprint():
    assert same_fingerprint(bytes(range(16)), bytes(range(16))) is True
    assert same_fingerprint(bytes(range(16)), bytes(16)) is False
    assert same_fingerprint(bytes(16), bytes(15)) is False