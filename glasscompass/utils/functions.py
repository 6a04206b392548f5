"""Module for miscellaneous multi-use functions"""

__all__ = ['default_to_zulu', 'format_decimal', 'round_half_up']

from datetime import datetime, timezone

from glasscompass.utils.logging import warn_once


def default_to_zulu(dt: datetime) -> datetime:
    """Add Zulu/UTC as timezone, if timezone not present"""
    if not dt.tzinfo:
        warn_once(
            'Datetime does not contain timezone information; Zulu/UTC time assumed. '
            '(this warning will not repeat)'
        )
        return dt.replace(tzinfo=timezone.utc)

    return dt


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def format_decimal(value: float, max_fraction_digits: int = 1) -> str:
    """
    Formats a number with at most `max_fraction_digits` digits after the decimal
    point, dropping trailing zeroes (and the point itself for whole numbers).

    Args:
        value:
            The number to format

        max_fraction_digits:
            The maximum number of digits to keep after the decimal point

    Returns:
        str
    """
    rounded = round_half_up(value, max_fraction_digits)
    text = f'{rounded:.{max_fraction_digits}f}'
    if '.' in text:
        text = text.rstrip('0').rstrip('.')

    return '0' if text == '-0' else text
