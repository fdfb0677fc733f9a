"""Flat, fixed-shape export of the parser state.

``NMEASnapshot`` has a slot for every field any supported sentence can carry,
so consumers can handle all sentence types with one record. Slots the last
sentence did not populate are "" (text) or 0 (counts).

Two satellite counts live side by side and mean different things:

* ``satellites_used`` is the number of satellite detail rows accumulated
  from GSV sentences, i.e. ``len(satellite_details)``. Despite its name it
  is not derived from GSA.
* ``satellite_ids_used`` is the GSA list of PRNs actually used in the fix
  (the ``satellites_used`` key of the field map), e.g. "04,05,09".
"""

from dataclasses import dataclass, field

from navnmea.nmea.fields import convert_to_decimal_degrees, parse_int_or_default
from navnmea.nmea.types import ParsedSentence, Satellite, sentence_fields


@dataclass(frozen=True)
class NMEASnapshot:
    """Read-only projection of the most recently parsed sentence.

    Attributes mirror the field-map keys, plus:

        formatted_latitude: Latitude in signed decimal degrees ("%.6f"), the
            raw value if it cannot be converted, "" if absent.
        formatted_longitude: Same for longitude.
        satellite_ids_used: GSA ``satellites_used`` PRN list.
        satellites_used: Count of accumulated GSV detail rows.
        satellite_details: The accumulated GSV rows.
    """

    type: str = ""
    time: str = ""
    date: str = ""
    latitude: str = ""
    lat_dir: str = ""
    longitude: str = ""
    lon_dir: str = ""
    formatted_latitude: str = ""
    formatted_longitude: str = ""
    fix_quality: str = ""
    satellites: str = ""
    altitude: str = ""
    altitude_units: str = ""
    status: str = ""
    speed_knots: str = ""
    speed_kmh: str = ""
    track_angle: str = ""
    track_true: str = ""
    track_magnetic: str = ""
    mode: str = ""
    fix_type: str = ""
    satellite_ids_used: str = ""
    pdop: str = ""
    hdop: str = ""
    vdop: str = ""
    day: str = ""
    month: str = ""
    year: str = ""
    rms: str = ""
    sigma_major: str = ""
    sigma_minor: str = ""
    orientation: str = ""
    sigma_lat: str = ""
    sigma_lon: str = ""
    sigma_alt: str = ""
    total_messages: int = 0
    message_number: int = 0
    satellites_in_view: int = 0
    satellites_used: int = 0
    satellite_details: tuple[Satellite, ...] = field(default_factory=tuple)
    message: str = ""


def build_snapshot(
    sentence: ParsedSentence | None,
    satellites: tuple[Satellite, ...],
) -> NMEASnapshot:
    """Build the export record for *sentence* and the accumulated satellites.

    Args:
        sentence: The last parsed record, or None for an empty parser.
        satellites: Satellites accumulated from the current GSV group.
    """
    values = sentence_fields(sentence) if sentence is not None else {}

    def text(key: str) -> str:
        return values.get(key, "")

    def count(key: str) -> int:
        return parse_int_or_default(text(key), 0)

    return NMEASnapshot(
        type=text("type"),
        time=text("time"),
        date=text("date"),
        latitude=text("latitude"),
        lat_dir=text("lat_dir"),
        longitude=text("longitude"),
        lon_dir=text("lon_dir"),
        formatted_latitude=convert_to_decimal_degrees(
            text("latitude"), text("lat_dir")
        ),
        formatted_longitude=convert_to_decimal_degrees(
            text("longitude"), text("lon_dir")
        ),
        fix_quality=text("fix_quality"),
        satellites=text("satellites"),
        altitude=text("altitude"),
        altitude_units=text("altitude_units"),
        status=text("status"),
        speed_knots=text("speed_knots"),
        speed_kmh=text("speed_kmh"),
        track_angle=text("track_angle"),
        track_true=text("track_true"),
        track_magnetic=text("track_magnetic"),
        mode=text("mode"),
        fix_type=text("fix_type"),
        satellite_ids_used=text("satellites_used"),
        pdop=text("pdop"),
        hdop=text("hdop"),
        vdop=text("vdop"),
        day=text("day"),
        month=text("month"),
        year=text("year"),
        rms=text("rms"),
        sigma_major=text("sigma_major"),
        sigma_minor=text("sigma_minor"),
        orientation=text("orientation"),
        sigma_lat=text("sigma_lat"),
        sigma_lon=text("sigma_lon"),
        sigma_alt=text("sigma_alt"),
        total_messages=count("total_messages"),
        message_number=count("message_number"),
        satellites_in_view=count("satellites_in_view"),
        satellites_used=len(satellites),
        satellite_details=satellites,
        message=text("message"),
    )
