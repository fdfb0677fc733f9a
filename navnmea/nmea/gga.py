"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |
           |      |        | |         | | |  |   |     | +-- Geoid height (not decoded)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL + units
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-6)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)
"""

from navnmea.nmea.fields import field_at
from navnmea.nmea.types import GGAData


def parse_gga(fields: list[str]) -> GGAData:
    """Map GGA fields to a ``GGAData`` record.

    Maps NMEA field indices to GGAData attributes:
        fields[1]  -> time
        fields[2]  -> latitude
        fields[3]  -> lat_dir
        fields[4]  -> longitude
        fields[5]  -> lon_dir
        fields[6]  -> fix_quality
        fields[7]  -> satellites
        fields[8]  -> hdop
        fields[9]  -> altitude
        fields[10] -> altitude_units

    Missing fields read as "".

    Args:
        fields: Positional fields of the sentence (index 0 is the type code)

    Returns:
        GGAData with raw field values
    """
    return GGAData(
        time=field_at(fields, 1),
        latitude=field_at(fields, 2),
        lat_dir=field_at(fields, 3),
        longitude=field_at(fields, 4),
        lon_dir=field_at(fields, 5),
        fix_quality=field_at(fields, 6),
        satellites=field_at(fields, 7),
        hdop=field_at(fields, 8),
        altitude=field_at(fields, 9),
        altitude_units=field_at(fields, 10),
    )
