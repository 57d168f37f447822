from __future__ import annotations


def elide(value: str, width: int = 100) -> str:
    return value if len(value) <= width else f'{value[: width - 3]}...'


def hex_escape(char: str) -> str:
    """Return *char* as one or two `\\uXXXX` JSON escapes."""
    code = ord(char)
    if code < 0x10000:
        return f'\\u{code:04x}'
    code -= 0x10000
    high = 0xD800 + (code >> 10)
    low = 0xDC00 + (code & 0x3FF)
    return f'\\u{high:04x}\\u{low:04x}'
