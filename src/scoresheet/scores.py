"""
Parsing of score values entered on the score sheet.
"""
from typing import Optional, Union


class InvalidScoreError(ValueError):
    """Raised when a score value is not empty and not a whole number."""


def parse_score(value: Union[str, int, None]) -> Optional[int]:
    """
    Turn a score value into an int, or None when the value is empty.

    An empty string means the score has not been entered yet; "0" is a
    real score of zero.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidScoreError(f"Invalid score: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise InvalidScoreError(f"Score cannot be negative: {value}")
        return value
    if not isinstance(value, str):
        raise InvalidScoreError(f"Invalid score: {value!r}")

    text = value.strip()
    if text == '':
        return None
    if not text.isdecimal():
        raise InvalidScoreError(f"Score must be a whole number: {value!r}")
    try:
        return int(text)
    except ValueError as e:
        raise InvalidScoreError(f"Score is too long: {len(text)} digits") from e
