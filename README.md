# advcache

Pure-Python building blocks for an HTTP response cache. It has no
dependencies outside the standard library.

## Modules

### `advcache.kvsort`

- `less(a, b)`: byte-wise lexicographic comparison; a strict prefix sorts first.
- `sort_kv(pairs)`: sorts a list of `(key, value)` pairs in place by key,
  keeping pairs with equal keys in their order, and returns the same list.

### `advcache.query`

- `parse_query(raw)`: splits a raw query string (`str` or bytes, leading `?`
  ignored) into `(key, value)` byte pairs. A segment without `=` gets the value
  `None`; empty segments between `&` give `(b"", None)`.
- `filter_and_sort_queries(pairs, allowed)`: keeps pairs whose key starts with
  any of the allowed prefixes and sorts them by key.
- `parse_filter_and_sort_query(raw, allowed)`: both steps at once.
- `filter_and_sort_headers(headers, allowed)`: takes a mapping or a sequence of
  `(name, value)` pairs and returns the allowed headers that have a non-empty
  value, sorted by name. Names match case-insensitively, the first occurrence
  of a repeated header wins, and the result carries the allowed name as given.

### `advcache.refresh`

- `refresh_probability(elapsed_ns, ttl_ns, beta)`: `1 - exp(-beta * x)` where
  `x` is `elapsed_ns / ttl_ns` clamped to `[0, 1]`. Raises `ValueError` when
  `ttl_ns` is not positive.
- `should_be_refreshed(elapsed_ns, ttl_ns, beta, coefficient, rng=None)`:
  `False` while the entry is younger than `ttl_ns * coefficient`; otherwise
  `True` with the probability above. `rng` is anything with a `random()`
  method (the `random` module by default).

### `advcache.metrics`

`Metrics` holds the cache counters (`set_hits`, `set_misses`, `set_errors`,
`set_total`, `set_panics`, `set_proxied_num`, `set_cache_length`,
`set_cache_memory`) and gauges (`set_rps`, `set_avg_response_time`).
Counters reject negative values with `ValueError`. `write_prometheus()` returns
every recorded metric as Prometheus text lines, sorted by name, e.g.
`adv_cache_cache_hits 10`. The metric names are module constants such as
`HITS`, `RPS` and `MAP_MEMORY_USAGE`.

### `advcache.payload`

`PayloadRequest(path, query, headers)` and
`PayloadResponse(status_code, headers, body)` describe a cached exchange.
`pack_payload(request, response)` encodes them with little-endian 32-bit
lengths and counts; `unpack_payload(data)` decodes them, raising
`PayloadEmptyError` for empty input and `ValueError` for truncated input.

### `advcache.entry_codec`

`EntryRecord(rule_path, key, shard, fingerprint, refreshed_at, payload)` is a
frozen record with `to_bytes()` and `EntryRecord.from_bytes(data)`. The
fingerprint must be 16 bytes, `key` and `shard` unsigned 64-bit, and
`refreshed_at` signed 64-bit. `same_fingerprint(a, b)` compares fingerprints in
constant time.

### `advcache.rate`

`Limiter(limit)` spaces events evenly at `limit` per second. `take()` blocks
until the next event is allowed, `limit()` returns the rate, `ticks()` yields
a running tick number at that rate until `close()` is called.

### `advcache.shutdown`

`Graceful(stop_event)` coordinates worker threads around a
`threading.Event`. Workers are counted with `add(n)` and `done()`.
`listen_cancel_and_await()` blocks until the event is set or, when called from
the main thread, SIGINT or SIGTERM arrives; it then sets the event and waits
for the worker count to reach zero, raising `GracefulTimeoutError` if that
takes longer than the timeout (10 seconds by default, changed with
`set_graceful_timeout`, which takes seconds or a `timedelta`).

### `advcache.locale`

- `advcache.locale.isolang`: the `IsoLang` enumeration,
  `try_iso_lang_from_string(value)` and `iso_list()`.
- `advcache.locale.locales`: the `Locale` enumeration,
  `try_locale_from_string(value)`, `locales_list()` and
  `locale_iso_lang(locale)`.
- `advcache.locale.translators`: the `TranslatorsName` enumeration,
  `try_translators_name_from_string(value)`, `translators_list()` and
  `translators_name_locale(name)`.
- `advcache.locale.links`: `locale_translators_name(locale)` and
  `iso_lang_locales(lang)`.

Lookups return `None` for unknown values.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Example

    from advcache.query import parse_filter_and_sort_query
    from advcache.refresh import refresh_probability

    pairs = parse_filter_and_sort_query(b"?b=2&a=1&skip=x", [b"a", b"b"])
    # [(b"a", b"1"), (b"b", b"2")]

    p = refresh_probability(elapsed_ns=5_000, ttl_ns=10_000, beta=0.4)

## What this package does not do

It is a library of parts, not a running cache. There is no HTTP server or
proxy, no command to start, no cache storage or eviction, no hashing of the
key material into cache keys or fingerprints, no matching of request paths
to cache rules, and no HTTP endpoint serving the metrics text.