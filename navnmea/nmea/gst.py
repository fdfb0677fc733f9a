"""GST sentence parser.

GST (GNSS Pseudorange Error Statistics) describes the expected accuracy of the
position fix as an error ellipse plus per-axis standard deviations.

GST Sentence Format:
    $GPGST,024603.00,1.2,0.8,1.0,45.0,0.5,0.6,0.7*5A
           |         |   |   |   |    |   |   |
           |         |   |   |   |    |   |   +-- Sigma altitude (m)
           |         |   |   |   |    |   +-- Sigma longitude (m)
           |         |   |   |   |    +-- Sigma latitude (m)
           |         |   |   |   +-- Orientation of semi-major axis (deg)
           |         |   |   +-- Sigma semi-minor axis
           |         |   +-- Sigma semi-major axis
           |         +-- RMS of pseudorange residuals
           +-- UTC time
"""

from navnmea.nmea.fields import cleanup, field_at
from navnmea.nmea.types import GSTData


def parse_gst(fields: list[str]) -> GSTData:
    """Map GST fields 1-8 to a ``GSTData`` record.

    The altitude sigma is the last field, so any stray '*' is stripped from it.
    """
    return GSTData(
        time=field_at(fields, 1),
        rms=field_at(fields, 2),
        sigma_major=field_at(fields, 3),
        sigma_minor=field_at(fields, 4),
        orientation=field_at(fields, 5),
        sigma_lat=field_at(fields, 6),
        sigma_lon=field_at(fields, 7),
        sigma_alt=cleanup(field_at(fields, 8)),
    )
