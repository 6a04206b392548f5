"""
Names for the 16 half-wind compass directions
"""

__all__ = [
    'DIRECTION_ABBREVIATIONS', 'SPOKEN_DIRECTIONS', 'direction_name', 'format_place_label'
]

from typing import Tuple

from glasscompass.calc import half_wind_index
from glasscompass.utils.functions import format_decimal

DIRECTION_ABBREVIATIONS: Tuple[str, ...] = (
    'N', 'NNE', 'NE', 'ENE',
    'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW',
    'W', 'WNW', 'NW', 'NNW',
)

SPOKEN_DIRECTIONS: Tuple[str, ...] = (
    'north', 'north north east', 'north east', 'east north east',
    'east', 'east south east', 'south east', 'south south east',
    'south', 'south south west', 'south west', 'west south west',
    'west', 'west north west', 'north west', 'north north west',
)


def direction_name(heading: float, spoken: bool = False) -> str:
    """
    Boxes the heading into its half-wind and returns that direction's name.

    Args:
        heading:
            The heading, in degrees

        spoken:
            Return the spelled-out name ("north north east") rather than the
            abbreviation ("NNE")

    Returns:
        str
    """
    table = SPOKEN_DIRECTIONS if spoken else DIRECTION_ABBREVIATIONS
    return table[half_wind_index(heading)]


def format_place_label(name: str, distance_km: float) -> str:
    """The text drawn beside a place's pin, e.g. 'Coit Tower (2.3 km)'"""
    return f'{name} ({format_decimal(distance_km, 1)} km)'
