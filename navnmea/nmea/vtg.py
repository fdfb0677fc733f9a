"""VTG sentence parser.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48
           |     | |     | |     | |     |
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Every value is followed by a unit label (T, M, N, K), so the data fields sit
at the odd indices 1, 3, 5 and 7.

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from navnmea.nmea.fields import field_at
from navnmea.nmea.types import VTGData


def parse_vtg(fields: list[str]) -> VTGData:
    """Map VTG fields to a ``VTGData`` record.

    Maps NMEA field indices to VTGData attributes:
        fields[1] -> track_true
        fields[3] -> track_magnetic
        fields[5] -> speed_knots
        fields[7] -> speed_kmh

    The unit labels at indices 2, 4, 6 and 8 are skipped.
    """
    return VTGData(
        track_true=field_at(fields, 1),
        track_magnetic=field_at(fields, 3),
        speed_knots=field_at(fields, 5),
        speed_kmh=field_at(fields, 7),
    )
