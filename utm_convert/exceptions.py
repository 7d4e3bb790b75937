"""Exceptions raised by utm_convert.

All errors derive from ``ValueError`` as well as ``UTMConvertError`` so callers
that already catch ``ValueError`` keep working.
"""

from typing import Any


class UTMConvertError(Exception):
    """Base class for all utm_convert errors."""


class UnknownDatumError(UTMConvertError, ValueError):
    """Raised when a datum identifier is not in the datum table.

    Attributes:
        datum: The rejected identifier, as given by the caller.
    """

    def __init__(self, datum: Any):
        self.datum = datum
        super().__init__(f"Invalid datum {datum!r}")


class ParseError(UTMConvertError, ValueError):
    """Raised when a string does not hold a decimal number.

    Attributes:
        text: The rejected input.
    """

    def __init__(self, text: Any):
        self.text = text
        super().__init__(f"Not a decimal number: {text!r}")


class InputRangeError(UTMConvertError, ValueError):
    """Raised by the opt-in validators when a value is outside its domain.

    Attributes:
        name: Name of the offending field (e.g. "latitude").
        value: The rejected value.
    """

    def __init__(self, name: str, value: Any, message: str):
        self.name = name
        self.value = value
        super().__init__(message)
