"""Stable colour assignment for events.

The same id always maps to the same palette slot, whatever the render
order. This is a presentation hash, not a cryptographic one.
"""

DEFAULT_PALETTE_SIZE = 5


def _string_hash(value: str) -> int:
    """31-multiplier hash wrapped to a signed 32-bit integer."""
    result = 0
    for char in value:
        result = (result * 31 + ord(char)) & 0xFFFFFFFF
    if result >= 0x80000000:
        result -= 0x100000000
    return result


def palette_index(event_id: str, palette_size: int = DEFAULT_PALETTE_SIZE) -> int:
    """Map an event id to a palette slot in ``range(palette_size)``.

    Numeric ids use the number itself; anything else is hashed.
    """
    if palette_size < 1:
        raise ValueError("palette_size must be positive")
    if event_id.isascii() and event_id.isdigit():
        return int(event_id) % palette_size
    return abs(_string_hash(event_id)) % palette_size
