"""Decoding of NMEA 0183 sentences from GPS receivers into typed records."""

from navnmea.nmea import (
    SUPPORTED_SENTENCE_TYPES,
    ChecksumError,
    FormatError,
    GGAData,
    GLLData,
    GroupAccumulator,
    GSAData,
    GSTData,
    GSVData,
    NMEAError,
    ParsedSentence,
    RMCData,
    Satellite,
    UnsupportedSentence,
    VTGData,
    ZDAData,
    calculate_checksum,
    convert_to_decimal_degrees,
    parse_sentence,
    sentence_fields,
    validate_checksum,
)
from navnmea.nmea_parser import NMEAParser
from navnmea.snapshot import NMEASnapshot, build_snapshot
from navnmea.summary import format_summary

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
    "NMEAParser",
    "NMEASnapshot",
    "ParsedSentence",
    "RMCData",
    "Satellite",
    "UnsupportedSentence",
    "VTGData",
    "ZDAData",
    "build_snapshot",
    "calculate_checksum",
    "convert_to_decimal_degrees",
    "format_summary",
    "parse_sentence",
    "sentence_fields",
    "validate_checksum",
]
