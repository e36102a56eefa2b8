from enum import IntEnum

from dhb.errors import InvalidBaseLabel, InvalidNumber


DIGITS = "0123456789ABCDEF"

_DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)}
_DIGIT_VALUES.update({c.lower(): i for i, c in enumerate(DIGITS[10:], start=10)})


class NumeralBase(IntEnum):
    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "NumeralBase":
        try:
            return _LABELS[label]
        except KeyError:
            raise InvalidBaseLabel(label) from None


_LABELS = {base.label: base for base in NumeralBase}

SUPPORTED_LABELS = tuple(_LABELS)


def parse_magnitude(num: str, src: NumeralBase) -> int:
    """Read ``num`` as an unsigned integer written in ``src``.

    Only the ASCII digits of ``DIGITS`` (either case) are accepted, so signs,
    whitespace, underscores and prefixes that ``int()`` would tolerate are
    rejected with ``InvalidNumber``.
    """
    if not num:
        raise InvalidNumber(num)

    radix = int(src)
    value = 0
    for char in num:
        digit = _DIGIT_VALUES.get(char)
        if digit is None or digit >= radix:
            raise InvalidNumber(num, radix, char)
        value = value * radix + digit
    return value


def render_magnitude(value: int, target: NumeralBase) -> str:
    if value < 0:
        raise ValueError("Only non-negative values can be rendered.")
    if value == 0:
        return "0"

    radix = int(target)
    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


def convert_base(num: str, src: NumeralBase, target: NumeralBase) -> str:
    """Convert a digit string from ``src`` to ``target``.

    The result is canonical: uppercase, without leading zeros, and "0" for
    a zero value. ``src == target`` still goes through the integer value, so
    it normalizes the input and rejects malformed digits.
    """
    return render_magnitude(parse_magnitude(num, src), target)
