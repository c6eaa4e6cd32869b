import re
import warnings
from typing import Optional, Tuple

from boundednumbers import clamp

from ..types.format_type import CHANNEL_MAX

HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})?", re.IGNORECASE)

FALLBACK_CHANNELS: Tuple[int, int, int, int] = (0, 0, 0, CHANNEL_MAX)


def parse_hex(hex_string: object) -> Optional[Tuple[int, int, int, int]]:
    """
    Parse ``#RRGGBB`` / ``#RRGGBBAA`` (``#`` optional, any case).

    Returns:
        (r, g, b, a) integers in [0, 255], alpha 255 when omitted,
        or None if the string does not match.
    """
    if not isinstance(hex_string, str):
        return None
    m = HEX_PATTERN.fullmatch(hex_string)
    if m is None:
        return None
    r, g, b, a = m.groups()
    return (
        int(r, 16),
        int(g, 16),
        int(b, 16),
        int(a, 16) if a is not None else CHANNEL_MAX,
    )


def hex_to_rgba(hex_string: object) -> Tuple[int, int, int, int]:
    """
    Lenient variant of :func:`parse_hex`.

    Unparseable input falls back to opaque black and emits a ``UserWarning``
    instead of raising.
    """
    channels = parse_hex(hex_string)
    if channels is None:
        warnings.warn(
            f"Could not parse hex color {hex_string!r}; falling back to opaque black",
            stacklevel=3,
        )
        return FALLBACK_CHANNELS
    return channels


def channel_to_hex(value: float) -> str:
    """Render one [0, 255] channel as two uppercase hex digits (rounded, clamped)."""
    byte = int(clamp(round(value), 0, CHANNEL_MAX))
    return f"{byte:02X}"


def rgba_to_hex(r: float, g: float, b: float, a: float) -> str:
    return "#" + "".join(channel_to_hex(c) for c in (r, g, b, a))
