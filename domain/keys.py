"""Byte-level key range helpers."""

# As a key: the smallest key. As a range end: no upper bound.
ZERO_BYTE = b"\x00"


def prefix_range_end(prefix: bytes) -> bytes:
    """Return the exclusive range end covering every key starting with ``prefix``.

    Trailing 0xff bytes cannot be incremented and are dropped. When nothing
    is left the range is open-ended.
    """
    end = bytearray(prefix)
    while end:
        if end[-1] < 0xFF:
            end[-1] += 1
            return bytes(end)
        end.pop()
    return ZERO_BYTE
