"""NMEA 0183 decoder for GGA, RMC, VTG, GSA, GSV, GLL, ZDA and GST sentences."""

from navnmea.nmea.checksum import calculate_checksum, validate_checksum
from navnmea.nmea.dispatch import SUPPORTED_SENTENCE_TYPES, parse_sentence
from navnmea.nmea.errors import ChecksumError, FormatError, NMEAError
from navnmea.nmea.fields import convert_to_decimal_degrees
from navnmea.nmea.satellites import GroupAccumulator
from navnmea.nmea.types import (
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    ParsedSentence,
    RMCData,
    Satellite,
    UnsupportedSentence,
    VTGData,
    ZDAData,
    sentence_fields,
)

__all__ = [
    "SUPPORTED_SENTENCE_TYPES",
    "ChecksumError",
    "FormatError",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSTData",
    "GSVData",
    "GroupAccumulator",
    "NMEAError",
    "ParsedSentence",
    "RMCData",
    "Satellite",
    "UnsupportedSentence",
    "VTGData",
    "ZDAData",
    "calculate_checksum",
    "convert_to_decimal_degrees",
    "parse_sentence",
    "sentence_fields",
    "validate_checksum",
]
