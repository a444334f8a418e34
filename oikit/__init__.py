"""Helpers for algorithm practice: text search, number theory, bits, counting, heaps, containers, timing, key decoding, a character canvas and file utilities."""

__version__ = "0.1.0"