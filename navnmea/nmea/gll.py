"""GLL sentence parser.

GLL (Geographic Position - Latitude/Longitude) is a compact position report.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A*1D
           |       | |        | |      |
           |       | |        | |      +-- Status (A = valid, V = void)
           |       | |        | +-- UTC time
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S
"""

from navnmea.nmea.fields import cleanup, field_at
from navnmea.nmea.types import GLLData


def parse_gll(fields: list[str]) -> GLLData:
    """Map GLL fields 1-6 to a ``GLLData`` record.

    The status is the last field, so any stray '*' is stripped from it.
    """
    return GLLData(
        latitude=field_at(fields, 1),
        lat_dir=field_at(fields, 2),
        longitude=field_at(fields, 3),
        lon_dir=field_at(fields, 4),
        time=field_at(fields, 5),
        status=cleanup(field_at(fields, 6)),
    )
