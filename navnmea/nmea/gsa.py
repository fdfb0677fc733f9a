"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the current
solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                     |   |   |
           | | |                     |   |   +-- VDOP
           | | |                     |   +-- HDOP
           | | |                     +-- PDOP
           | | +-- 12 PRN slots (indices 3-14), unused ones empty
           | +-- Fix type (1 = none, 2 = 2D, 3 = 3D)
           +-- Mode (M = manual, A = automatic)

Some receivers send fewer than 12 PRN slots, and many drop trailing empty
fields. PRNs are plain integers while DOP values carry a decimal point, so
the DOP block starts at the first field with a '.' (never later than
index 15).
"""

from navnmea.nmea.fields import field_at
from navnmea.nmea.types import GSAData

_FIRST_PRN_INDEX = 3
_PDOP_INDEX = 15
_DECIMAL_POINT = "."


def _pdop_index(fields: list[str]) -> int:
    """Index of PDOP: the first decimal field from index 3 on, else 15."""
    for index in range(_FIRST_PRN_INDEX, min(len(fields), _PDOP_INDEX + 1)):
        if _DECIMAL_POINT in fields[index]:
            return index
    return _PDOP_INDEX


def _join_used_satellites(fields: list[str], pdop_index: int) -> str:
    """Join the non-empty PRN slots with commas, e.g. "04,05,09"."""
    prns = (field_at(fields, index) for index in range(_FIRST_PRN_INDEX, pdop_index))
    return ",".join(prn for prn in prns if prn)


def parse_gsa(fields: list[str]) -> GSAData:
    """Map GSA fields to a ``GSAData`` record.

    Maps NMEA field indices to GSAData attributes:
        fields[1]     -> mode
        fields[2]     -> fix_type
        fields[3..14] -> satellites_used (non-empty slots, comma-joined)
        fields[15]    -> pdop
        fields[16]    -> hdop
        fields[17]    -> vdop
    """
    pdop_index = _pdop_index(fields)
    return GSAData(
        mode=field_at(fields, 1),
        fix_type=field_at(fields, 2),
        satellites_used=_join_used_satellites(fields, pdop_index),
        pdop=field_at(fields, pdop_index),
        hdop=field_at(fields, pdop_index + 1),
        vdop=field_at(fields, pdop_index + 2),
    )
