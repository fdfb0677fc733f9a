"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^                       checksum content                      ^^
    start                                                    checksum (0x47 = 71)

The checksum suffix is optional in NMEA 0183. A sentence without '*' is
treated as valid.
"""


def _calculate_xor_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the character code of each character
    in the content into an 8-bit accumulator.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result & 0xFF


def calculate_checksum(content: str) -> str:
    """Return the two-digit uppercase hex checksum for a sentence payload.

    Example:
        >>> calculate_checksum("GPXYZ,1,2,3")
        '50'
    """
    return f"{_calculate_xor_checksum(content):02X}"


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Returning True straight away when there is no '*' (no checksum)
    2. Extracting the content between '$' and the first '*'
    3. Computing the XOR of all content characters
    4. Comparing, case-insensitively, against the two characters after '*'

    Anything after those two characters (line terminators, padding) is
    ignored.

    Args:
        sentence: NMEA sentence, normally starting with '$'.

    Returns:
        True if the checksum is absent or matches, False otherwise
        (including a truncated or non-hexadecimal checksum).

    Example:
        >>> validate_checksum("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        True
        >>> validate_checksum("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*48")
        False
        >>> validate_checksum("$GPZDA,201530.00,04,07,2002,00,00")
        True
    """
    end = sentence.find("*")
    if end < 0:
        return True

    content = sentence[1:end]
    provided = sentence[end + 1 : end + 3]

    return calculate_checksum(content) == provided.upper()
