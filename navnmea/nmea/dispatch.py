"""Sentence dispatch: from one raw sentence to one typed record.

This is the main entry point of the ``nmea`` package. It performs:
1. Format checks (non-empty, leading '$')
2. Optional checksum validation
3. Type-code extraction (the 5 characters after '$', e.g. "GPGGA")
4. Field splitting and routing to the matching extractor

Unknown type codes are not errors: they produce an ``UnsupportedSentence``.
"""

import logging
from collections.abc import Callable

from navnmea.nmea.checksum import validate_checksum
from navnmea.nmea.errors import ChecksumError, FormatError
from navnmea.nmea.fields import SUPPORTED_TALKER_ID, split_fields
from navnmea.nmea.gga import parse_gga
from navnmea.nmea.gll import parse_gll
from navnmea.nmea.gsa import parse_gsa
from navnmea.nmea.gst import parse_gst
from navnmea.nmea.gsv import parse_gsv
from navnmea.nmea.rmc import parse_rmc
from navnmea.nmea.satellites import GroupAccumulator
from navnmea.nmea.types import GSVData, ParsedSentence, UnsupportedSentence
from navnmea.nmea.vtg import parse_vtg
from navnmea.nmea.zda import parse_zda

logger = logging.getLogger(__name__)

_START_DELIMITER = "$"
_TYPE_CODE_LENGTH = 5

_EXTRACTORS: dict[str, Callable[[list[str]], ParsedSentence]] = {
    SUPPORTED_TALKER_ID + "GGA": parse_gga,
    SUPPORTED_TALKER_ID + "RMC": parse_rmc,
    SUPPORTED_TALKER_ID + "VTG": parse_vtg,
    SUPPORTED_TALKER_ID + "GSA": parse_gsa,
    SUPPORTED_TALKER_ID + "GSV": parse_gsv,
    SUPPORTED_TALKER_ID + "GLL": parse_gll,
    SUPPORTED_TALKER_ID + "ZDA": parse_zda,
    SUPPORTED_TALKER_ID + "GST": parse_gst,
}

SUPPORTED_SENTENCE_TYPES = tuple(_EXTRACTORS)


def _check_format(sentence: str | None) -> str:
    if not sentence or not sentence.startswith(_START_DELIMITER):
        logger.warning("Rejected malformed NMEA sentence: %r", sentence)
        raise FormatError(f"Invalid NMEA sentence: {sentence!r}")
    return sentence


def extract_type_code(sentence: str) -> str:
    """Return the type code that follows '$', e.g. "GPGGA"."""
    start = len(_START_DELIMITER)
    return sentence[start : start + _TYPE_CODE_LENGTH]


def parse_sentence(
    sentence: str | None,
    validate: bool = True,
    accumulator: GroupAccumulator | None = None,
) -> ParsedSentence:
    """Decode one already-delimited NMEA sentence.

    Trailing whitespace (line terminators) is ignored.

    Args:
        sentence: Raw sentence, e.g. "$GPGGA,123519,...*47".
        validate: Reject the sentence when its '*HH' checksum is present
            and wrong. A sentence without a checksum always passes.
        accumulator: Receives the satellite rows of GSV sentences. Nothing
            is written to it unless the whole sentence is accepted.

    Returns:
        The record for the sentence's type, or ``UnsupportedSentence``.

    Raises:
        FormatError: If the sentence is empty or does not start with '$'.
        ChecksumError: If *validate* is set and the checksum does not match.

    Example:
        >>> record = parse_sentence("$GPZDA,201530.00,04,07,2002,00,00*60")
        >>> record.year
        '2002'
    """
    sentence = _check_format(sentence.rstrip() if sentence else sentence)

    if validate and not validate_checksum(sentence):
        logger.warning("Checksum validation failed for: %s", sentence)
        raise ChecksumError(f"Checksum validation failed for: {sentence}")

    type_code = extract_type_code(sentence)
    extractor = _EXTRACTORS.get(type_code)
    if extractor is None:
        logger.info("Unsupported sentence type: %s", type_code)
        return UnsupportedSentence(
            sentence_type=type_code,
            message=f"Unsupported sentence type: {type_code}",
        )

    logger.debug("Dispatching %s sentence", type_code)
    record = extractor(split_fields(sentence))

    if accumulator is not None and isinstance(record, GSVData):
        accumulator.add(record)

    return record
