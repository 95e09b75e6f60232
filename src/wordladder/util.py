"""Formatting helpers for the command line tool."""

import json

from wordladder.word import Word


def time_str(seconds: float) -> str:
    """Format a duration as "HH:MM:SS.ss"."""
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def format_ladder(words: list[Word]) -> str:
    """Format a ladder as a bracketed list of quoted strings, e.g. `["cat", "cot"]`."""
    return json.dumps([str(w) for w in words])
