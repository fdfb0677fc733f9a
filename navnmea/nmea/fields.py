"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data) or missing altogether (receivers drop trailing empty fields).
Field values are kept as the raw strings the receiver sent; these helpers only
locate them, clean them up and, where a number is needed, convert them with a
documented fallback instead of failing.
"""


# Only the GPS talker prefix is dispatched; other constellations ("GN",
# "GL", ...) arrive as unsupported sentence types.
SUPPORTED_TALKER_ID = "GP"

_CHECKSUM_DELIMITER = "*"
_FIELD_SEPARATOR = ","


def split_fields(sentence: str) -> list[str]:
    """Split a sentence into its positional fields.

    The '*HH' checksum suffix is removed first, so it never ends up inside
    the last data field. Index 0 holds the '$' and the type code.

    Example:
        >>> split_fields("$GPZDA,201530.00,04,07,2002,00,00*60")
        ['$GPZDA', '201530.00', '04', '07', '2002', '00', '00']
    """
    body, delimiter, _ = sentence.rpartition(_CHECKSUM_DELIMITER)
    if not delimiter:
        body = sentence
    return body.split(_FIELD_SEPARATOR)


def field_at(fields: list[str], index: int) -> str:
    """Return ``fields[index]``, or an empty string past the end.

    Receivers routinely omit trailing empty fields, so a short field list is
    normal and must read the same as explicitly empty fields.
    """
    if index < len(fields):
        return fields[index]
    return ""


def cleanup(value: str) -> str:
    """Strip stray '*' characters from the final field of a sentence."""
    return value.replace(_CHECKSUM_DELIMITER, "")


def parse_int_or_default(value: str, default: int) -> int:
    """Parse an integer field, returning *default* if it is empty or invalid.

    Used for counters such as GSV message numbers, where a single corrupt
    token must not abort extraction of the rest of the sentence.

    Example:
        >>> parse_int_or_default("08", 0)
        8
        >>> parse_int_or_default("x8", 1)
        1
    """
    try:
        return int(value)
    except ValueError:
        return default


def _degree_length(value: str) -> int:
    """Number of leading characters that hold whole degrees.

    Latitude is DDMM.MMMM and longitude DDDMM.MMMM. Two minute digits always
    precede the decimal point, so a point at index 5 or later means a
    three-digit degree prefix.
    """
    dot_position = value.find(".")
    if dot_position > 4:
        return 3
    return 2


def _parse_coordinate_parts(value: str) -> tuple[float, float]:
    """Split an NMEA angle into degrees and decimal minutes.

    Raises:
        ValueError: If either part is not numeric.

    Example:
        >>> _parse_coordinate_parts("4807.038")  # 48° 07.038'
        (48.0, 7.038)
        >>> _parse_coordinate_parts("01131.000")  # 11° 31.000'
        (11.0, 31.0)
    """
    split = min(_degree_length(value), len(value))
    degrees = float(value[:split])
    minute_text = value[split:]
    minutes = float(minute_text) if minute_text else 0.0
    return degrees, minutes


def convert_to_decimal_degrees(value: str | None, hemisphere: str | None) -> str:
    """Convert an NMEA coordinate to signed decimal degrees.

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    South and West (case-insensitive) are negative. The result is formatted
    with six fractional digits.

    Args:
        value: Coordinate in DDMM.MMMM or DDDMM.MMMM format (e.g., "4807.038")
        hemisphere: Hemisphere indicator ("N", "S", "E" or "W"), may be empty

    Returns:
        Formatted decimal degrees, an empty string for empty input, or the
        raw *value* unchanged when it cannot be parsed. The raw value is
        still available separately, so nothing is lost.

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        '48.117300'
        >>> convert_to_decimal_degrees("01131.000", "W")
        '-11.516667'
    """
    if not value:
        return ""

    try:
        degrees, minutes = _parse_coordinate_parts(value)
    except ValueError:
        return value

    decimal_degrees = degrees + minutes / 60.0
    if hemisphere and hemisphere.upper() in ("S", "W"):
        decimal_degrees = -decimal_degrees

    return f"{decimal_degrees:.6f}"
