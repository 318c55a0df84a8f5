"""Containers, trees, numeral conversions, base64, Unicode helpers and benchmark timers."""

__version__ = "0.1.0"