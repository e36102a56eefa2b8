class ConversionError(ValueError):
    """Base class for everything dhb reports back to the user."""


class InvalidBaseLabel(ConversionError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"invalid base value '{label}'")


class InvalidNumber(ConversionError):
    def __init__(self, num: str, base: int | None = None, char: str | None = None):
        self.num = num
        self.char = char
        if not num:
            message = "empty number"
        else:
            message = f"invalid digit '{char}' for base {base}"
        super().__init__(message)


class InvalidOptionValue(ConversionError):
    def __init__(self, option: str, value: str):
        self.option = option
        self.value = value
        super().__init__(f"invalid number format for {option}: '{value}'")


class MissingArgument(ConversionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"missing {name}")
