"""Building blocks for an HTTP response cache: key material, encodings, refresh policy, metrics, rate limiting, shutdown and locale tables."""

__version__ = "0.1.0"