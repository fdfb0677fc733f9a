"""Human-readable, multi-line summaries of parsed sentences."""

from collections.abc import Callable, Iterable

from navnmea.nmea.types import (
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    ParsedSentence,
    RMCData,
    Satellite,
    VTGData,
    ZDAData,
)

__all__ = ["format_summary"]


def _position(label: str, value: str, direction: str) -> str:
    return f"{label}: {value} ({direction})"


def _gga_lines(data: GGAData) -> list[str]:
    return [
        f"Time: {data.time}",
        _position("Latitude", data.latitude, data.lat_dir),
        _position("Longitude", data.longitude, data.lon_dir),
        f"Fix Quality: {data.fix_quality}",
        f"Satellites: {data.satellites}",
        f"HDOP: {data.hdop}",
        f"Altitude: {data.altitude} {data.altitude_units}",
    ]


def _rmc_lines(data: RMCData) -> list[str]:
    return [
        f"Time: {data.time}",
        f"Status: {data.status}",
        _position("Latitude", data.latitude, data.lat_dir),
        _position("Longitude", data.longitude, data.lon_dir),
        f"Speed (knots): {data.speed_knots}",
        f"Track Angle: {data.track_angle}",
        f"Date: {data.date}",
    ]


def _vtg_lines(data: VTGData) -> list[str]:
    return [
        f"Track (True): {data.track_true}",
        f"Track (Magnetic): {data.track_magnetic}",
        f"Speed: {data.speed_knots} knots / {data.speed_kmh} km/h",
    ]


def _gsa_lines(data: GSAData) -> list[str]:
    return [
        f"Mode: {data.mode}",
        f"Fix Type: {data.fix_type}",
        f"Connected Satellites: {data.satellites_used}",
        f"PDOP: {data.pdop}",
        f"HDOP: {data.hdop}",
        f"VDOP: {data.vdop}",
    ]


def _satellite_line(satellite: Satellite) -> str:
    return (
        f"  ID: {satellite.id}, Elevation: {satellite.elevation}, "
        f"Azimuth: {satellite.azimuth}, SNR: {satellite.snr}"
    )


def _gsv_lines(data: GSVData, satellites: tuple[Satellite, ...]) -> list[str]:
    lines = [
        f"Total Messages: {data.total_messages}",
        f"Message Number: {data.message_number}",
        f"Satellites in View: {data.satellites_in_view}",
    ]
    if satellites:
        lines.append("Satellite Details:")
        lines.extend(_satellite_line(satellite) for satellite in satellites)
    return lines


def _gll_lines(data: GLLData) -> list[str]:
    return [
        _position("Latitude", data.latitude, data.lat_dir),
        _position("Longitude", data.longitude, data.lon_dir),
        f"Time: {data.time}",
        f"Status: {data.status}",
    ]


def _zda_lines(data: ZDAData) -> list[str]:
    return [
        f"Time: {data.time}",
        f"Date: {data.day}/{data.month}/{data.year}",
    ]


def _gst_lines(data: GSTData) -> list[str]:
    return [
        f"Time: {data.time}",
        f"RMS: {data.rms}",
        f"Sigma Major: {data.sigma_major}",
        f"Sigma Minor: {data.sigma_minor}",
        f"Orientation: {data.orientation}",
        f"Sigma Latitude: {data.sigma_lat}",
        f"Sigma Longitude: {data.sigma_lon}",
        f"Sigma Altitude: {data.sigma_alt}",
    ]


_TEMPLATES: dict[type, Callable[..., list[str]]] = {
    GGAData: _gga_lines,
    RMCData: _rmc_lines,
    VTGData: _vtg_lines,
    GSAData: _gsa_lines,
    GLLData: _gll_lines,
    ZDAData: _zda_lines,
    GSTData: _gst_lines,
}


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def format_summary(
    sentence: ParsedSentence | None,
    satellites: tuple[Satellite, ...] = (),
) -> str:
    """Render *sentence* as "Label: value" lines, one template per type.

    GSV summaries list the whole accumulated group, not only the rows of
    the last sentence, so *satellites* should be the accumulator contents.

    Example:
        >>> print(format_summary(ZDAData("201530.00", "04", "07", "2002")))
        Sentence Type: GPZDA
        Time: 201530.00
        Date: 04/07/2002
    """
    sentence_type = sentence.sentence_type if sentence is not None else ""
    lines = [f"Sentence Type: {sentence_type}"]

    if isinstance(sentence, GSVData):
        lines.extend(_gsv_lines(sentence, satellites))
    elif sentence is not None and type(sentence) in _TEMPLATES:
        lines.extend(_TEMPLATES[type(sentence)](sentence))
    else:
        lines.append("Unsupported sentence type.")

    return _join(lines)
