"""Stopwatch Game: stop an invisible stopwatch as close to a target time as you can."""

__version__ = "1.0.0"
