"""NMEA data types for parsed sentences.

This module defines one dataclass per supported sentence category, plus the
record used for every other type code.

Design Decisions:
    1. Raw string fields: values are kept exactly as the receiver sent them
       (an omitted field is ""). Numeric interpretation is left to callers,
       with two exceptions: the GSV counters, which drive satellite
       accumulation and are parsed with documented defaults, and the
       formatted coordinates, which are derived on demand.

    2. Attribute names are the field-map keys: ``sentence_fields()`` turns any
       record back into the flat ``{key: value}`` mapping, with ``type``
       first and the remaining keys in field order. Fields marked with
       ``metadata={"field_map": False}`` (the GSV rows) are left out.

    3. ``sentence_type`` is the 5-character code (e.g. "GPGGA"). It is a class
       constant on the supported records and an instance field on
       ``UnsupportedSentence``.
"""

from dataclasses import dataclass, field, fields
from typing import ClassVar, Union


@dataclass(frozen=True)
class Satellite:
    """One satellite row from a GSV sentence.

    Attributes:
        id: Satellite PRN number.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees from true north (0-359).
        snr: Signal-to-noise ratio in dB-Hz, "" when not tracking.
    """

    id: str
    elevation: str
    azimuth: str
    snr: str = ""


@dataclass
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        time: UTC time in HHMMSS.ss format.
        latitude: Latitude in DDMM.MMMM format.
        lat_dir: "N" or "S".
        longitude: Longitude in DDDMM.MMMM format.
        lon_dir: "E" or "W".
        fix_quality: 0 = invalid, 1 = GPS, 2 = DGPS, 4 = RTK fixed,
            5 = RTK float, 6 = dead reckoning.
        satellites: Number of satellites used in the fix.
        hdop: Horizontal dilution of precision.
        altitude: Antenna altitude above mean sea level.
        altitude_units: Unit of ``altitude``, normally "M".
    """

    sentence_type: ClassVar[str] = "GPGGA"

    time: str
    latitude: str
    lat_dir: str
    longitude: str
    lon_dir: str
    fix_quality: str
    satellites: str
    hdop: str
    altitude: str
    altitude_units: str


@dataclass
class RMCData:
    """Parsed RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        time: UTC time in HHMMSS.ss format.
        status: "A" = active/valid, "V" = void.
        latitude: Latitude in DDMM.MMMM format.
        lat_dir: "N" or "S".
        longitude: Longitude in DDDMM.MMMM format.
        lon_dir: "E" or "W".
        speed_knots: Speed over ground in knots.
        track_angle: Course over ground in degrees (true).
        date: Date in DDMMYY format.
    """

    sentence_type: ClassVar[str] = "GPRMC"

    time: str
    status: str
    latitude: str
    lat_dir: str
    longitude: str
    lon_dir: str
    speed_knots: str
    track_angle: str
    date: str


@dataclass
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        track_true: Track relative to true north in degrees.
            Typically empty when stationary.
        track_magnetic: Track relative to magnetic north in degrees.
        speed_knots: Ground speed in knots.
        speed_kmh: Ground speed in km/h.
    """

    sentence_type: ClassVar[str] = "GPVTG"

    track_true: str
    track_magnetic: str
    speed_knots: str
    speed_kmh: str


@dataclass
class GSAData:
    """Parsed GSA (DOP and Active Satellites) sentence.

    Attributes:
        mode: "M" = manual, "A" = automatic 2D/3D selection.
        fix_type: 1 = no fix, 2 = 2D, 3 = 3D.
        satellites_used: Comma-joined PRNs of the satellites used in the
            solution (empty slots skipped), e.g. "04,05,09".
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
    """

    sentence_type: ClassVar[str] = "GPGSA"

    mode: str
    fix_type: str
    satellites_used: str
    pdop: str
    hdop: str
    vdop: str


@dataclass
class GSVData:
    """Parsed GSV (Satellites in View) sentence.

    A full satellite view is spread over ``total_messages`` sentences of up
    to four satellites each. ``satellites`` holds only this sentence's rows;
    the group-wide list lives in ``GroupAccumulator``.

    Attributes:
        total_messages: Number of sentences in the group (default 1).
        message_number: Position of this sentence in the group (default 1).
        satellites_in_view: Total satellites in view (default 0).
        satellites: Satellite rows carried by this sentence.
    """

    sentence_type: ClassVar[str] = "GPGSV"

    total_messages: int
    message_number: int
    satellites_in_view: int
    satellites: list[Satellite] = field(
        default_factory=list, metadata={"field_map": False}
    )


@dataclass
class GLLData:
    """Parsed GLL (Geographic Position, Latitude/Longitude) sentence."""

    sentence_type: ClassVar[str] = "GPGLL"

    latitude: str
    lat_dir: str
    longitude: str
    lon_dir: str
    time: str
    status: str


@dataclass
class ZDAData:
    """Parsed ZDA (Time and Date) sentence."""

    sentence_type: ClassVar[str] = "GPZDA"

    time: str
    day: str
    month: str
    year: str


@dataclass
class GSTData:
    """Parsed GST (Pseudorange Noise Statistics) sentence.

    Attributes:
        time: UTC time of the associated fix.
        rms: RMS value of the pseudorange residuals.
        sigma_major: Standard deviation of the semi-major error ellipse axis.
        sigma_minor: Standard deviation of the semi-minor error ellipse axis.
        orientation: Orientation of the semi-major axis in degrees.
        sigma_lat: Standard deviation of latitude error, meters.
        sigma_lon: Standard deviation of longitude error, meters.
        sigma_alt: Standard deviation of altitude error, meters.
    """

    sentence_type: ClassVar[str] = "GPGST"

    time: str
    rms: str
    sigma_major: str
    sigma_minor: str
    orientation: str
    sigma_lat: str
    sigma_lon: str
    sigma_alt: str


@dataclass
class UnsupportedSentence:
    """A well-formed sentence whose type code is not decoded.

    This is a normal outcome, not an error.
    """

    sentence_type: str
    message: str


ParsedSentence = Union[
    GGAData,
    RMCData,
    VTGData,
    GSAData,
    GSVData,
    GLLData,
    ZDAData,
    GSTData,
    UnsupportedSentence,
]


def sentence_fields(sentence: ParsedSentence) -> dict[str, str]:
    """Project a parsed record onto its flat field map.

    Example:
        >>> sentence_fields(ZDAData("201530.00", "04", "07", "2002"))
        {'type': 'GPZDA', 'time': '201530.00', 'day': '04', 'month': '07', 'year': '2002'}
    """
    values = {"type": sentence.sentence_type}
    for attribute in fields(sentence):
        if attribute.name == "sentence_type":
            continue
        if not attribute.metadata.get("field_map", True):
            continue
        values[attribute.name] = str(getattr(sentence, attribute.name))
    return values
