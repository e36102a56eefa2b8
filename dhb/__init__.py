"""dhb - convert arbitrarily large numbers between bin, oct, dec and hex."""

from dhb.conversions import NumeralBase, convert_base
from dhb.errors import (
    ConversionError,
    InvalidBaseLabel,
    InvalidNumber,
    InvalidOptionValue,
    MissingArgument,
)
from dhb.formatting import group_digits, set_width, strip_prefix

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "InvalidBaseLabel",
    "InvalidNumber",
    "InvalidOptionValue",
    "MissingArgument",
    "NumeralBase",
    "convert_base",
    "group_digits",
    "set_width",
    "strip_prefix",
]
