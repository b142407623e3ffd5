"""Annotations Restored core: legacy annotation codecs and the playback visibility engine."""

__version__ = "0.1.0"
