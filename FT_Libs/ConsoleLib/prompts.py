"""
Console prompting helpers.

All reprompt loops live here so the filters themselves can always be
called directly with valid parameters. Input and output functions are
injectable for scripted use and tests.
"""

from typing import Callable, Optional, Tuple
import re

from FT_Libs.constants import MESSAGE_ILLEGAL_INTEGER

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

LOCATION_PATTERN = re.compile(r"^\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)$")


def parse_location(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a "(row,col)" location.

    Returns:
        (row, col), or None if the text is not in that form

    Example:
        >>> parse_location("(10, 25)")
        (10, 25)
        >>> parse_location("10,25") is None
        True
    """
    match = LOCATION_PATTERN.match(text.strip())
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


class ConsolePrompter:
    """Reads lines and validated integers from the console."""

    def __init__(self, input_func: InputFunc = input, output_func: OutputFunc = print):
        self._input = input_func
        self._output = output_func

    def say(self, message: str) -> None:
        self._output(message)

    def get_line(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def get_integer(self, prompt: str) -> int:
        """Prompt until the reply parses as an integer."""
        while True:
            reply = self.get_line(prompt)
            try:
                return int(reply)
            except ValueError:
                self.say(MESSAGE_ILLEGAL_INTEGER)

    def get_integer_in_range(
        self,
        prompt: str,
        minimum: int,
        maximum: Optional[int] = None,
    ) -> int:
        """Prompt until the reply is an integer within [minimum, maximum]."""
        while True:
            value = self.get_integer(prompt)
            if value >= minimum and (maximum is None or value <= maximum):
                return value
