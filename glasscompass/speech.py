"""Spoken readout of the current heading"""

__all__ = ['HeadingReader', 'SpeechSink', 'format_heading']

from typing import Protocol

from glasscompass.calc import mod
from glasscompass.directions import direction_name
from glasscompass.utils.functions import round_half_up
from glasscompass.utils.mixins import LoggingMixin


class SpeechSink(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that can read a string aloud, e.g. a text-to-speech engine"""

    def speak(self, text: str) -> None:
        ...


def format_heading(heading: float) -> str:
    """
    Formats a heading the way it is read aloud, e.g. "45 degrees north east".

    The heading is rounded to a whole degree (359.6 becomes 0, not 360) and the
    direction name is taken from the unrounded heading's half-wind.

    Args:
        heading:
            The heading, in degrees

    Returns:
        str
    """
    rounded = int(mod(round_half_up(heading, 0), 360))
    unit = 'degree' if rounded == 1 else 'degrees'
    return f'{rounded} {unit} {direction_name(heading, spoken=True)}'


class HeadingReader(LoggingMixin):
    """
    Reads headings aloud through a speech sink.

    Args:
        sink:
            The object that will speak the formatted text
    """

    def __init__(self, sink: SpeechSink):
        super().__init__()
        self.sink = sink

    def read_aloud(self, heading: float) -> str:
        """Speaks the heading and returns the text that was spoken"""
        text = format_heading(heading)
        self.logger.debug('Reading heading aloud: %s', text)
        self.sink.speak(text)
        return text
