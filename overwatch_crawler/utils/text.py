"""
Text helpers for turning page labels and values into keys and numbers
"""

import logging
import re
from typing import Union

Number = Union[int, float]

NAN = float('nan')

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
_LEADING_FLOAT = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

# Unit suffix -> milliseconds, singular form
DURATION_UNITS = {
    'second': 1000,
    'minute': 60000,
    'hour': 3600000,
    'day': 86400000,
}

# Weights for "D:H:M:S" fields read from the right
COLON_WEIGHTS = [1000, 60000, 3600000, 86400000]


def sanitize(label: str) -> str:
    """
    Normalize a human readable label into a snake case key.

    "Eliminations - Most in Game" becomes "eliminations_most_in_game".
    Applying it twice gives the same result as applying it once.
    """
    key = label.strip().replace(' - ', '_')
    return re.sub(r'\s+', '_', key).lower()


def parse_int(token: str) -> Number:
    """Read the leading integer of a token, NaN when there is none"""
    match = _LEADING_INT.match(token or '')
    return int(match.group(1)) if match else NAN


def parse_float(token: str) -> float:
    """Read the leading decimal number of a token, NaN when there is none"""
    match = _LEADING_FLOAT.match(token or '')
    return float(match.group(1)) if match else NAN


def to_timestamp(token: str) -> Number:
    """
    Convert a duration token into milliseconds.

    Accepts the colon form ("1:30:00", "05:12") and the word form
    ("3 minutes", "1 hour", "2 days").

    Args:
        token: Duration text as shown on the page

    Returns:
        Milliseconds, or NaN when no number can be read
    """
    if token.find(':') > 0:
        fields = token.split(':')[::-1]
        total = 0
        for weight, field in zip(COLON_WEIGHTS, fields):
            value = parse_int(field)
            if value != value:  # NaN
                return NAN
            total += value * weight
        return total

    swap = token[:-1] if token.endswith('s') else token
    for unit, factor in DURATION_UNITS.items():
        if swap.endswith(unit):
            count = parse_int(swap)
            return count * factor if count == count else NAN

    # Unknown unit word, only the number is kept
    logging.debug(f"Unknown duration unit in {token!r}, keeping leading number")
    return parse_int(swap)


def cast(token: str) -> Number:
    """
    Infer the numeric value behind a stat token.

    Decimals become floats, durations become milliseconds and
    everything else is read as an integer with thousands separators removed.
    Malformed input gives NaN instead of raising.
    """
    token = (token or '').strip()
    if token.find('.') > 0:
        return parse_float(token)
    if token.find(':') > 0 or len(token.split(' ')) > 1:
        return to_timestamp(token)
    return parse_int(token.replace(',', ''))
