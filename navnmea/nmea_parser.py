"""Stateful NMEA 0183 parser holding the most recently decoded sentence."""

import threading

from navnmea.nmea.dispatch import parse_sentence
from navnmea.nmea.fields import convert_to_decimal_degrees
from navnmea.nmea.satellites import GroupAccumulator
from navnmea.nmea.types import ParsedSentence, Satellite, sentence_fields
from navnmea.snapshot import NMEASnapshot, build_snapshot
from navnmea.summary import format_summary

__all__ = ["NMEAParser"]


class NMEAParser:
    """Decoded view of the last NMEA sentence plus the current GSV group.

    A parser is usually built from one sentence::

        parser = NMEAParser("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        parser.get("altitude")        # "545.4"
        parser.formatted_latitude     # "48.117300"

    ``parse()`` can be called again on the same instance. Each successful
    call replaces the decoded fields; only the GSV satellite list carries
    over, so a GSV group fed sentence by sentence accumulates::

        parser = NMEAParser()
        for sentence in gsv_group:
            parser.parse(sentence)
        parser.satellite_count        # satellites of the whole group

    A failed ``parse()`` changes nothing. Parsing and reading are guarded by
    one lock, so concurrent readers never observe a half-applied sentence.

    Args:
        sentence: Sentence to parse right away. ``None``, "" or whitespace
            leaves the parser empty.
        validate_checksum: Reject sentences whose '*HH' checksum is wrong.
        accumulator: GSV accumulator to use instead of a private one, for
            callers that share a satellite view between parsers.

    Raises:
        FormatError: If *sentence* is given and does not start with '$'.
        ChecksumError: If *sentence* fails checksum validation.
    """

    def __init__(
        self,
        sentence: str | None = None,
        validate_checksum: bool = True,
        accumulator: GroupAccumulator | None = None,
    ) -> None:
        self._validate_checksum = validate_checksum
        self._accumulator = accumulator if accumulator is not None else GroupAccumulator()
        self._sentence: ParsedSentence | None = None
        self._lock = threading.Lock()
        if sentence is not None and sentence.strip():
            self.parse(sentence)

    @classmethod
    def of(cls, sentence: str | None, validate_checksum: bool = True) -> "NMEAParser":
        """Build a parser from a single sentence."""
        return cls(sentence, validate_checksum=validate_checksum)

    @property
    def validate_checksum(self) -> bool:
        return self._validate_checksum

    @property
    def accumulator(self) -> GroupAccumulator:
        return self._accumulator

    def parse(self, sentence: str) -> ParsedSentence:
        """Decode *sentence* and make it the current state.

        Raises:
            FormatError: If the sentence is empty or does not start with '$'.
            ChecksumError: If validation is enabled and the checksum is wrong.
        """
        with self._lock:
            record = parse_sentence(
                sentence,
                validate=self._validate_checksum,
                accumulator=self._accumulator,
            )
            self._sentence = record
            return record

    @property
    def sentence(self) -> ParsedSentence | None:
        """The typed record of the last parsed sentence, if any."""
        with self._lock:
            return self._sentence

    @property
    def sentence_type(self) -> str:
        """Type code of the last parsed sentence, e.g. "GPGGA", or ""."""
        with self._lock:
            if self._sentence is None:
                return ""
            return self._sentence.sentence_type

    @property
    def fields(self) -> dict[str, str]:
        """Copy of the field map: ``type`` plus the keys of the sentence type."""
        with self._lock:
            if self._sentence is None:
                return {}
            return sentence_fields(self._sentence)

    def get(self, key: str, default: str = "") -> str:
        """Return one field of the last sentence, or *default* if absent."""
        return self.fields.get(key, default)

    @property
    def satellite_count(self) -> int:
        """Number of satellites accumulated from the current GSV group."""
        with self._lock:
            return len(self._accumulator)

    @property
    def satellites(self) -> tuple[Satellite, ...]:
        """Satellites accumulated from the current GSV group."""
        with self._lock:
            return self._accumulator.satellites

    @property
    def formatted_latitude(self) -> str:
        """Latitude in signed decimal degrees; see ``convert_to_decimal_degrees``."""
        fields = self.fields
        return convert_to_decimal_degrees(fields.get("latitude"), fields.get("lat_dir"))

    @property
    def formatted_longitude(self) -> str:
        """Longitude in signed decimal degrees; see ``convert_to_decimal_degrees``."""
        fields = self.fields
        return convert_to_decimal_degrees(fields.get("longitude"), fields.get("lon_dir"))

    def to_snapshot(self) -> NMEASnapshot:
        """Export the current state as a fixed-shape ``NMEASnapshot``."""
        with self._lock:
            return build_snapshot(self._sentence, self._accumulator.satellites)

    def summary(self) -> str:
        """Multi-line, human-readable summary of the last parsed sentence."""
        with self._lock:
            return format_summary(self._sentence, self._accumulator.satellites)
