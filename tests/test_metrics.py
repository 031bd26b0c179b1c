import pytest

from advcache.metrics import (
    AVG_DURATION,
    HITS,
    MAP_LENGTH,
    MISSES,
    RPS,
    Metrics,
)


def test_empty_metrics_write_nothing():
    assert Metrics().write_prometheus() == ""


def test_counter_is_written_with_its_name():
    m = Metrics()
    m.set_hits(5)
    assert m.write_prometheus() == "adv_cache_cache_hits 5\n"


def test_counter_set_overwrites_previous_value():
    m = Metrics()
    m.set_misses(3)
    m.set_misses(7)
    assert m.write_prometheus() == f"{MISSES} 7\n"


def test_output_is_sorted_by_name():
    m = Metrics()
    m.set_total(1)
    m.set_hits(2)
    m.set_errors(3)
    m.set_panics(4)
    m.set_proxied_num(5)
    m.set_cache_length(6)
    m.set_cache_memory(7)
    m.set_rps(8)
    m.set_avg_response_time(9)
    lines = m.write_prometheus().splitlines()
    names = [line.split(" ")[0] for line in lines]
    assert names == sorted(names)
    assert len(names) == 9
    assert f"{MAP_LENGTH} 6" in lines


def test_gauge_formats_fraction_and_whole_numbers():
    m = Metrics()
    m.set_rps(1.5)
    m.set_avg_response_time(250)
    text = m.write_prometheus()
    assert f"{RPS} 1.5\n" in text
    assert f"{AVG_DURATION} 250\n" in text


def test_negative_counter_is_rejected():
    m = Metrics()
    with pytest.raises(ValueError):
        m.set_hits(-1)
    assert HITS not in m.write_prometheus()


def test_instances_are_independent():
    first = Metrics()
    second = Metrics()
    first.set_hits(1)
    assert second.write_prometheus() == ""