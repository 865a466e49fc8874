"""Composable lazy iterators: sources, adaptors and consumers, with random access where inputs allow."""

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "chain",
    "collect",
    "core",
    "extremes",
    "generator",
    "mapping",
    "once",
    "range",
    "repeat",
    "skip_while",
    "take",
    "unzip",
    "zipping",
]