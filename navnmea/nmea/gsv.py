"""GSV sentence parser.

GSV (GNSS Satellites in View) lists every satellite the receiver can see,
spread over several sentences of up to four satellites each.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,41,02,17,063,42,03,13,053,43,04,03,013,42*70
           | | |  |  |  |   |  +-------------+-------------+-- 3 more rows
           | | |  |  |  |   +-- SNR (dB-Hz, empty when not tracking)
           | | |  |  |  +-- Azimuth (degrees)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN
           | | +-- Satellites in view
           | +-- Message number in group
           +-- Total messages in group

The counters are parsed with fixed defaults (1, 1 and 0) when they are empty
or corrupt, so the satellite rows are still extracted.
"""

from navnmea.nmea.fields import field_at, parse_int_or_default
from navnmea.nmea.satellites import parse_satellite_rows
from navnmea.nmea.types import GSVData

_DEFAULT_TOTAL_MESSAGES = 1
_DEFAULT_MESSAGE_NUMBER = 1
_DEFAULT_SATELLITES_IN_VIEW = 0


def parse_gsv(fields: list[str]) -> GSVData:
    """Map GSV fields to a ``GSVData`` record.

    Maps NMEA field indices to GSVData attributes:
        fields[1]  -> total_messages (default 1)
        fields[2]  -> message_number (default 1)
        fields[3]  -> satellites_in_view (default 0)
        fields[4:] -> satellites, 4 fields per row
    """
    return GSVData(
        total_messages=parse_int_or_default(
            field_at(fields, 1), _DEFAULT_TOTAL_MESSAGES
        ),
        message_number=parse_int_or_default(
            field_at(fields, 2), _DEFAULT_MESSAGE_NUMBER
        ),
        satellites_in_view=parse_int_or_default(
            field_at(fields, 3), _DEFAULT_SATELLITES_IN_VIEW
        ),
        satellites=parse_satellite_rows(fields),
    )
