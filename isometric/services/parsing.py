import logging
import re
from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_COLOR = 0
NO_CONTRIBUTIONS_TOKEN = "No"

_COUNT_PATTERN = re.compile(r"^\s*(?:(No)\b|(\d[\d,]*))")
_FUNCTIONAL_COLOR_PATTERN = re.compile(r"^\s*rgba?\((.*)\)\s*$", re.IGNORECASE)
_HEX_COLOR_PATTERN = re.compile(r"^\s*#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})\s*$")


def _clamp_channel(raw_value: float | int | str) -> int:
    value = int(float(raw_value))
    return max(0, min(255, value))


def pack_rgb(red: float | int | str, green: float | int | str, blue: float | int | str) -> int:
    """Clamp three channels to 0..255 and pack them as a 24-bit integer.

    Raises:
        ValueError: If a channel is not numeric.
    """

    r, g, b = (_clamp_channel(channel) for channel in (red, green, blue))
    return (r << 16) | (g << 8) | b


def _channels_from_string(raw_color: str) -> Sequence[str]:
    functional = _FUNCTIONAL_COLOR_PATTERN.match(raw_color)
    if functional:
        body = functional.group(1).split("/")[0]
        separator = "," if "," in body else None
        parts = [part.strip() for part in body.split(separator) if part.strip()]
        return parts[:3]

    hex_match = _HEX_COLOR_PATTERN.match(raw_color)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) == 3:
            digits = "".join(char * 2 for char in digits)
        return [str(int(digits[index : index + 2], 16)) for index in (0, 2, 4)]

    raise ValueError(f"unrecognized color format: {raw_color!r}")


def decode_color(raw_color: object) -> int:
    """Decode a channel triple or a CSS color string into a 24-bit value.

    Never raises: anything that cannot be decoded becomes DEFAULT_COLOR.
    """

    if raw_color is None:
        return DEFAULT_COLOR

    try:
        if isinstance(raw_color, str):
            channels = _channels_from_string(raw_color)
        else:
            channels = list(raw_color)
        if len(channels) != 3:
            raise ValueError(f"expected 3 channels, got {len(channels)}")
        return pack_rgb(*channels)
    except (TypeError, ValueError, OverflowError) as exc:
        logger.debug("Falling back to default color for %r: %s", raw_color, exc)
        return DEFAULT_COLOR


def color_to_hex(color: int) -> str:
    """Format a 24-bit color as six lowercase hex digits, without `#`."""

    return f"{color & 0xFFFFFF:06x}"


def extract_count(annotation: object) -> int:
    """Read the contribution count from an annotation such as
    "5 contributions on March 3rd." or "No contributions on March 3rd."
    """

    if not isinstance(annotation, str) or not annotation:
        if annotation is not None:
            logger.debug("Ignoring non-text contribution annotation: %r", annotation)
        return 0

    match = _COUNT_PATTERN.match(annotation)
    if not match:
        logger.debug("Unrecognized contribution annotation: %r", annotation)
        return 0

    if match.group(1) == NO_CONTRIBUTIONS_TOKEN:
        return 0

    return int(match.group(2).replace(",", ""), 10)
