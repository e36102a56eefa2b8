PREFIXES = ("0x", "0b", "0o")
PREFIX_LEN = 2


def strip_prefix(num: str) -> str:
    # lowercase prefixes only, "0X" stays
    if len(num) <= PREFIX_LEN:
        return num
    if num[:PREFIX_LEN] in PREFIXES:
        return num[PREFIX_LEN:]
    return num


def set_width(num: str, width: int) -> str:
    if width <= 0 or width <= len(num):
        return num
    return "0" * (width - len(num)) + num


def group_digits(num: str, grouping: int) -> str:
    """Split ``num`` into space separated chunks of ``grouping`` digits.

    Chunks are counted from the right, so only the leftmost one can be short:
    ``group_digits("123456789", 2) == "1 23 45 67 89"``.
    """
    if grouping <= 0 or grouping >= len(num):
        return num

    head = len(num) % grouping
    groups = [num[:head]] if head else []
    groups.extend(num[i:i + grouping] for i in range(head, len(num), grouping))
    return " ".join(groups)
