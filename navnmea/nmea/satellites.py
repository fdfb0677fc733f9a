"""Satellite-in-view accumulation across a GSV group.

A receiver reports its satellite view as a group of GSV sentences, each
carrying up to four satellites. ``GroupAccumulator`` stitches the rows of
one group back into a single list:

    AwaitingGroup --(message_number == 1)--> InGroup
    InGroup       --(message_number == 1)--> InGroup (list cleared first)
    InGroup       --(any other number)-----> InGroup (rows appended)

There is no "group complete" transition. Rows are appended in arrival order
without reordering or de-duplication, and nothing is checked against
``total_messages`` or ``satellites_in_view``. A partially received group is
therefore visible mid-stream; callers that need a complete view can ask
``is_complete()`` or compare ``len(accumulator)`` with ``satellites_in_view``.

The accumulator is not synchronized. ``NMEAParser`` guards its own
accumulator with the parser lock.
"""

import logging
from collections.abc import Iterator

from navnmea.nmea.fields import cleanup, field_at
from navnmea.nmea.types import GSVData, Satellite

logger = logging.getLogger(__name__)

_FIRST_ROW_INDEX = 4
_ROW_WIDTH = 4
_FIRST_MESSAGE_NUMBER = 1


def parse_satellite_rows(fields: list[str]) -> list[Satellite]:
    """Read the satellite rows packed into a GSV sentence.

    Rows start at index 4 and are 4 fields wide (id, elevation, azimuth,
    snr). A row is read only while at least 4 more fields remain, so a
    truncated final row is dropped.

    Example:
        >>> parse_satellite_rows(["$GPGSV", "1", "1", "01", "05", "20", "123", "44"])
        [Satellite(id='05', elevation='20', azimuth='123', snr='44')]
    """
    rows = []
    for index in range(_FIRST_ROW_INDEX, len(fields) - _ROW_WIDTH + 1, _ROW_WIDTH):
        rows.append(
            Satellite(
                id=field_at(fields, index),
                elevation=field_at(fields, index + 1),
                azimuth=field_at(fields, index + 2),
                snr=cleanup(field_at(fields, index + 3)),
            )
        )
    return rows


class GroupAccumulator:
    """Satellite list shared by the successive sentences of a GSV group.

    Example:
        >>> accumulator = GroupAccumulator()
        >>> accumulator.add(first_message)   # message_number == 1, 4 rows
        >>> accumulator.add(second_message)  # message_number == 2, 4 rows
        >>> len(accumulator)
        8
    """

    def __init__(self) -> None:
        self._satellites: list[Satellite] = []
        self._message_numbers: list[int] = []

    def __len__(self) -> int:
        return len(self._satellites)

    def __iter__(self) -> Iterator[Satellite]:
        return iter(self._satellites)

    @property
    def satellites(self) -> tuple[Satellite, ...]:
        """Satellites accumulated for the current group, in arrival order."""
        return tuple(self._satellites)

    @property
    def message_numbers(self) -> tuple[int, ...]:
        """Message numbers of the GSV sentences seen in the current group."""
        return tuple(self._message_numbers)

    def add(self, message: GSVData) -> None:
        """Fold one GSV sentence into the group.

        Message number 1 starts a new group and discards whatever was
        accumulated before, complete or not. Any other message number appends.
        """
        if message.message_number == _FIRST_MESSAGE_NUMBER:
            if self._satellites:
                logger.debug(
                    "New GSV group, discarding %d satellites", len(self._satellites)
                )
            self.clear()

        self._message_numbers.append(message.message_number)
        self._satellites.extend(message.satellites)

    def clear(self) -> None:
        """Forget the current group."""
        self._satellites.clear()
        self._message_numbers.clear()

    def is_complete(self, total_messages: int) -> bool:
        """Tell whether messages 1..total_messages have all been seen.

        This is a query only; accumulation never waits for it.
        """
        expected = set(range(_FIRST_MESSAGE_NUMBER, total_messages + 1))
        return expected <= set(self._message_numbers)
