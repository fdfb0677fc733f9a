"""RMC sentence parser.

RMC (Recommended Minimum Navigation Information) carries the minimum data a
navigator needs: position, speed and course over ground, date and a validity
flag.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |
           |      | |        | |         | |     |     |      +-- Magnetic variation (not decoded)
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Track angle (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A = active, V = void)
           +-- UTC time
"""

from navnmea.nmea.fields import field_at
from navnmea.nmea.types import RMCData


def parse_rmc(fields: list[str]) -> RMCData:
    """Map RMC fields 1-9 to an ``RMCData`` record."""
    return RMCData(
        time=field_at(fields, 1),
        status=field_at(fields, 2),
        latitude=field_at(fields, 3),
        lat_dir=field_at(fields, 4),
        longitude=field_at(fields, 5),
        lon_dir=field_at(fields, 6),
        speed_knots=field_at(fields, 7),
        track_angle=field_at(fields, 8),
        date=field_at(fields, 9),
    )
