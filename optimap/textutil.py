"""String helpers used by the exporters."""


def trim(s: str) -> str:
    return s.strip()


def ltrim(s: str) -> str:
    return s.lstrip()


def rtrim(s: str) -> str:
    return s.rstrip()


def zero_padded(number: int, digits: int) -> str:
    """Pad with leading zeros to ``digits``. Wider numbers are left as-is."""
    return str(number).zfill(digits)
