"""Sentence builders shared by the test suites."""

from navnmea import calculate_checksum

GGA_SENTENCE = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
ZDA_SENTENCE = "$GPZDA,201530.00,04,07,2002,00,00*60"

GSV_FIRST_PAYLOAD = "GPGSV,2,1,08,01,40,083,41,02,17,063,42,03,13,053,43,04,03,013,42"
GSV_SECOND_PAYLOAD = "GPGSV,2,2,08,05,20,123,44,06,05,223,45,07,11,323,43,08,32,073,42"


def with_checksum(payload: str) -> str:
    """Wrap *payload* as "$<payload>*HH" with its correct checksum."""
    return f"${payload}*{calculate_checksum(payload)}"


GSV_FIRST = with_checksum(GSV_FIRST_PAYLOAD)
GSV_SECOND = with_checksum(GSV_SECOND_PAYLOAD)


def corrupt_checksum(sentence: str) -> str:
    """Change the last checksum digit of *sentence* to a wrong value."""
    replacement = "0" if sentence[-1] != "0" else "1"
    return sentence[:-1] + replacement
