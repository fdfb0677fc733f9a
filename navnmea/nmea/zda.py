"""ZDA sentence parser.

ZDA (Time and Date) reports UTC time with a full four-digit year.

ZDA Sentence Format:
    $GPZDA,201530.00,04,07,2002,00,00*60
           |         |  |  |    |  |
           |         |  |  |    +--+-- Local zone hours/minutes (not decoded)
           |         |  |  +-- Year
           |         |  +-- Month
           |         +-- Day
           +-- UTC time
"""

from navnmea.nmea.fields import field_at
from navnmea.nmea.types import ZDAData


def parse_zda(fields: list[str]) -> ZDAData:
    """Map ZDA fields 1-4 to a ``ZDAData`` record."""
    return ZDAData(
        time=field_at(fields, 1),
        day=field_at(fields, 2),
        month=field_at(fields, 3),
        year=field_at(fields, 4),
    )
