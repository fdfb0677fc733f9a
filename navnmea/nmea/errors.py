"""Exceptions raised when a sentence cannot be decoded at all.

Only these two kinds ever leave the parser. Everything else that can be
wrong with a sentence (an unknown type code, a corrupt counter, an
unparseable coordinate, missing trailing fields) degrades to a default value
instead, so one bad field never hides the rest of the sentence.
"""


class NMEAError(ValueError):
    """Base class for sentences rejected by the parser."""


class FormatError(NMEAError):
    """The sentence is missing, empty, or does not start with '$'."""


class ChecksumError(NMEAError):
    """The '*HH' checksum is present but does not match the payload.

    Raised separately from ``FormatError`` so callers can decide to retry
    with validation disabled or to drop the sentence.
    """
