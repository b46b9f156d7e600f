"""tfa: coordinate-addressed artifact fetcher."""

__version__ = "0.0.1"
