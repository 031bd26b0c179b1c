"""Application metrics with Prometheus text exposition."""

from __future__ import annotations

import math
import threading
from decimal import Decimal
from typing import Dict, Union

AVG_DURATION = "adv_cache_avg_duration_ns"
RPS = "adv_cache_rps"
TOTAL = "adv_cache_total"
ERRORED = "adv_cache_errors"
PANICKED = "adv_cache_panics"
PROXIED = "adv_cache_proxies"
HITS = "adv_cache_cache_hits"
MISSES = "adv_cache_cache_misses"
MAP_MEMORY_USAGE = "adv_cache_cache_memory_usage"
MAP_LENGTH = "adv_cache_cache_length"


def _format_float(value: float) -> str:
    """Format a float in the shortest ``%g`` style used by the exposition."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"
    digits_tuple = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digits_tuple.digits)
    point = len(digits) + digits_tuple.exponent
    stripped = digits.rstrip("0")
    point -= len(digits) - len(stripped) - (len(digits) - len(stripped))
    digits = stripped
    exponent = point - 1
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


class Metrics:
    """Counters and gauges describing the cache, exposed as Prometheus text."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Dict[str, int] = {}
        self._gauges: Dict[str, float] = {}

    def _set_counter(self, name: str, value: int) -> None:
        value = int(value)
        if value < 0:
            raise ValueError(f"counter {name} cannot be negative: {value}")
        with self._lock:
            self._counters[name] = value

    def _set_gauge(self, name: str, value: Union[int, float]) -> None:
        with self._lock:
            self._gauges[name] = float(value)

    def set_hits(self, value: int) -> None:
        self._set_counter(HITS, value)

    def set_misses(self, value: int) -> None:
        self._set_counter(MISSES, value)

    def set_errors(self, value: int) -> None:
        self._set_counter(ERRORED, value)

    def set_total(self, value: int) -> None:
        self._set_counter(TOTAL, value)

    def set_panics(self, value: int) -> None:
        self._set_counter(PANICKED, value)

    def set_proxied_num(self, value: int) -> None:
        self._set_counter(PROXIED, value)

    def set_rps(self, value: float) -> None:
        self._set_gauge(RPS, value)

    def set_cache_length(self, count: int) -> None:
        self._set_counter(MAP_LENGTH, count)

    def set_cache_memory(self, size: int) -> None:
        self._set_counter(MAP_MEMORY_USAGE, size)

    def set_avg_response_time(self, avg: float) -> None:
        self._set_gauge(AVG_DURATION, avg)

    def write_prometheus(self) -> str:
        """Return all recorded metrics in Prometheus text format, sorted by name."""
        with self._lock:
            lines = {name: f"{name} {value}" for name, value in self._counters.items()}
            lines.update(
                {name: f"{name} {_format_float(value)}" for name, value in self._gauges.items()}
            )
        return "".join(lines[name] + "\n" for name in sorted(lines))