"""Unit tests for the stateful NMEA parser, its snapshot and summary."""

import threading

import pytest

from navnmea import (
    ChecksumError,
    FormatError,
    GGAData,
    GroupAccumulator,
    NMEAParser,
    NMEASnapshot,
    Satellite,
)
from tests.helpers import (
    GGA_SENTENCE,
    GSV_FIRST,
    GSV_SECOND,
    ZDA_SENTENCE,
    corrupt_checksum,
    with_checksum,
)


class TestNMEAParser:
    """Tests for NMEAParser state handling."""

    def test_end_to_end_gga(self):
        parser = NMEAParser(GGA_SENTENCE, validate_checksum=True)
        assert parser.sentence_type == "GPGGA"
        assert parser.get("time") == "123519"
        assert parser.get("altitude") == "545.4"
        assert parser.formatted_latitude == "48.117300"
        assert parser.formatted_longitude == "11.516667"
        assert isinstance(parser.sentence, GGAData)

    def test_of_constructor(self):
        parser = NMEAParser.of(ZDA_SENTENCE)
        assert parser.get("year") == "2002"
        assert parser.validate_checksum is True

    @pytest.mark.parametrize("sentence", [None, "", "  \r\n"])
    def test_empty_construction(self, sentence):
        parser = NMEAParser(sentence)
        assert parser.sentence is None
        assert parser.sentence_type == ""
        assert parser.fields == {}
        assert parser.satellite_count == 0
        assert parser.formatted_latitude == ""

    def test_checksum_rejection_leaves_state_empty(self):
        with pytest.raises(ChecksumError):
            NMEAParser(corrupt_checksum(GGA_SENTENCE), validate_checksum=True)

        parser = NMEAParser()
        with pytest.raises(ChecksumError):
            parser.parse(corrupt_checksum(GGA_SENTENCE))
        assert parser.fields == {}
        assert parser.sentence_type == ""

    def test_validation_disabled(self):
        parser = NMEAParser(corrupt_checksum(GGA_SENTENCE), validate_checksum=False)
        assert parser.get("altitude") == "545.4"

    def test_format_error_on_construction(self):
        with pytest.raises(FormatError):
            NMEAParser("GPGGA,123519")

    def test_parse_empty_raises(self):
        with pytest.raises(FormatError):
            NMEAParser().parse("")

    def test_failed_parse_keeps_previous_sentence(self):
        parser = NMEAParser(ZDA_SENTENCE)
        with pytest.raises(ChecksumError):
            parser.parse(corrupt_checksum(GGA_SENTENCE))
        assert parser.sentence_type == "GPZDA"
        assert parser.get("day") == "04"

    def test_unsupported_type(self):
        parser = NMEAParser("$GPXYZ,1,2,3*hh", validate_checksum=False)
        assert parser.fields == {
            "type": "GPXYZ",
            "message": "Unsupported sentence type: GPXYZ",
        }

    def test_reparse_replaces_fields(self):
        parser = NMEAParser(GGA_SENTENCE)
        parser.parse(ZDA_SENTENCE)
        assert parser.sentence_type == "GPZDA"
        assert parser.get("altitude") == ""
        assert "latitude" not in parser.fields

    def test_fields_is_a_copy(self):
        parser = NMEAParser(GGA_SENTENCE)
        parser.fields["time"] = "000000"
        assert parser.get("time") == "123519"

    def test_get_default(self):
        assert NMEAParser(GGA_SENTENCE).get("vdop", "n/a") == "n/a"

    def test_gsv_group_accumulates(self):
        parser = NMEAParser(GSV_FIRST)
        parser.parse(GSV_SECOND)
        assert parser.satellite_count == 8
        assert parser.get("message_number") == "2"
        assert parser.satellites[4] == Satellite("05", "20", "123", "44")

    def test_new_gsv_group_clears(self):
        parser = NMEAParser(GSV_FIRST)
        parser.parse(GSV_SECOND)
        parser.parse(GSV_FIRST)
        assert parser.satellite_count == 4

    def test_satellites_survive_other_sentences(self):
        parser = NMEAParser(GSV_FIRST)
        parser.parse(GGA_SENTENCE)
        assert parser.satellite_count == 4
        assert parser.sentence_type == "GPGGA"

    def test_shared_accumulator(self):
        accumulator = GroupAccumulator()
        NMEAParser(GSV_FIRST, accumulator=accumulator)
        second = NMEAParser(GSV_SECOND, accumulator=accumulator)
        assert second.satellite_count == 8
        assert second.accumulator is accumulator

    def test_concurrent_parsing(self):
        parser = NMEAParser()
        sentences = [GSV_FIRST, GSV_SECOND, GGA_SENTENCE, ZDA_SENTENCE] * 50
        errors = []

        def check(snapshot):
            if snapshot.type == "GPGSV":
                assert snapshot.total_messages == 2
                assert snapshot.altitude == ""
            elif snapshot.type == "GPGGA":
                assert snapshot.altitude == "545.4"
                assert snapshot.year == ""
            else:
                assert snapshot.type == "GPZDA"
                assert snapshot.year == "2002"
                assert snapshot.total_messages == 0
            assert snapshot.satellites_used > 0
            assert snapshot.satellites_used % 4 == 0

        def worker():
            try:
                for sentence in sentences:
                    parser.parse(sentence)
                    check(parser.to_snapshot())
            except AssertionError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert parser.sentence_type in ("GPGSV", "GPGGA", "GPZDA")

    def test_parse_waits_for_lock(self):
        parser = NMEAParser(ZDA_SENTENCE)
        worker = threading.Thread(target=parser.parse, args=(GGA_SENTENCE,))
        with parser._lock:
            worker.start()
            worker.join(timeout=0.1)
            assert worker.is_alive()
            assert parser._sentence.sentence_type == "GPZDA"
        worker.join()
        assert parser.sentence_type == "GPGGA"


class TestSnapshot:
    """Tests for NMEAParser.to_snapshot."""

    def test_empty_snapshot(self):
        assert NMEAParser().to_snapshot() == NMEASnapshot()

    def test_gga_snapshot(self):
        snapshot = NMEAParser(GGA_SENTENCE).to_snapshot()
        assert snapshot.type == "GPGGA"
        assert snapshot.time == "123519"
        assert snapshot.latitude == "4807.038"
        assert snapshot.formatted_latitude == "48.117300"
        assert snapshot.formatted_longitude == "11.516667"
        assert snapshot.altitude == "545.4"
        assert snapshot.altitude_units == "M"
        assert snapshot.satellites == "08"
        assert snapshot.hdop == "0.9"
        assert snapshot.date == ""
        assert snapshot.satellites_in_view == 0
        assert snapshot.satellites_used == 0
        assert snapshot.message == ""

    def test_rmc_snapshot(self):
        parser = NMEAParser(
            with_checksum("GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E")
        )
        snapshot = parser.to_snapshot()
        assert snapshot.status == "A"
        assert snapshot.date == "191194"
        assert snapshot.speed_knots == "000.5"
        assert snapshot.track_angle == "054.7"
        assert snapshot.formatted_latitude == "49.274167"
        assert snapshot.formatted_longitude == "-123.185333"

    def test_gsa_snapshot_keeps_both_satellite_counts(self):
        parser = NMEAParser(GSV_FIRST)
        parser.parse(with_checksum("GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1"))
        snapshot = parser.to_snapshot()
        assert snapshot.satellite_ids_used == "04,05,09,12,24"
        assert snapshot.satellites_used == 4
        assert snapshot.pdop == "2.5"
        assert snapshot.vdop == "2.1"
        assert snapshot.mode == "A"
        assert snapshot.fix_type == "3"

    def test_gsv_snapshot(self):
        parser = NMEAParser(GSV_FIRST)
        parser.parse(GSV_SECOND)
        snapshot = parser.to_snapshot()
        assert snapshot.total_messages == 2
        assert snapshot.message_number == 2
        assert snapshot.satellites_in_view == 8
        assert snapshot.satellites_used == 8
        assert len(snapshot.satellite_details) == 8

    def test_gst_and_zda_snapshot(self):
        parser = NMEAParser(
            with_checksum("GPGST,024603.00,1.2,0.8,1.0,45.0,0.5,0.6,0.7")
        )
        snapshot = parser.to_snapshot()
        assert snapshot.rms == "1.2"
        assert snapshot.sigma_alt == "0.7"
        assert snapshot.orientation == "45.0"

        parser.parse(ZDA_SENTENCE)
        snapshot = parser.to_snapshot()
        assert (snapshot.day, snapshot.month, snapshot.year) == ("04", "07", "2002")
        assert snapshot.rms == ""

    def test_unparseable_coordinate_passes_through(self):
        parser = NMEAParser(with_checksum("GPGLL,49x6.45,N,12311.12,W,225444,A"))
        snapshot = parser.to_snapshot()
        assert snapshot.formatted_latitude == "49x6.45"
        assert snapshot.formatted_longitude == "-123.185333"

    def test_unsupported_snapshot(self):
        snapshot = NMEAParser("$GPXYZ,1,2,3", validate_checksum=False).to_snapshot()
        assert snapshot.type == "GPXYZ"
        assert snapshot.message == "Unsupported sentence type: GPXYZ"
        assert snapshot.time == ""


class TestSummary:
    """Tests for NMEAParser.summary."""

    def test_gga_summary(self):
        assert NMEAParser(GGA_SENTENCE).summary() == (
            "Sentence Type: GPGGA\n"
            "Time: 123519\n"
            "Latitude: 4807.038 (N)\n"
            "Longitude: 01131.000 (E)\n"
            "Fix Quality: 1\n"
            "Satellites: 08\n"
            "HDOP: 0.9\n"
            "Altitude: 545.4 M\n"
        )

    def test_vtg_summary(self):
        parser = NMEAParser("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        assert parser.summary() == (
            "Sentence Type: GPVTG\n"
            "Track (True): 054.7\n"
            "Track (Magnetic): 034.4\n"
            "Speed: 005.5 knots / 010.2 km/h\n"
        )

    def test_zda_summary(self):
        assert NMEAParser(ZDA_SENTENCE).summary() == (
            "Sentence Type: GPZDA\n"
            "Time: 201530.00\n"
            "Date: 04/07/2002\n"
        )

    def test_gsv_summary_lists_group(self):
        parser = NMEAParser(GSV_FIRST)
        parser.parse(GSV_SECOND)
        lines = parser.summary().splitlines()
        assert lines[:4] == [
            "Sentence Type: GPGSV",
            "Total Messages: 2",
            "Message Number: 2",
            "Satellites in View: 8",
        ]
        assert lines[4] == "Satellite Details:"
        assert lines[5] == "  ID: 01, Elevation: 40, Azimuth: 083, SNR: 41"
        assert len(lines) == 13

    def test_gsa_summary(self):
        parser = NMEAParser(with_checksum("GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1"))
        assert "Connected Satellites: 04,05,09,12,24\n" in parser.summary()

    def test_gll_rmc_gst_summaries_start_with_type(self):
        for payload in (
            "GPGLL,4916.45,N,12311.12,W,225444,A",
            "GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W",
            "GPGST,024603.00,1.2,0.8,1.0,45.0,0.5,0.6,0.7",
        ):
            summary = NMEAParser(with_checksum(payload)).summary()
            assert summary.startswith(f"Sentence Type: {payload[:5]}\n")
            assert "Unsupported" not in summary

    def test_unsupported_summary(self):
        parser = NMEAParser("$GPXYZ,1,2,3", validate_checksum=False)
        assert parser.summary() == (
            "Sentence Type: GPXYZ\n"
            "Unsupported sentence type.\n"
        )

    def test_empty_summary(self):
        assert NMEAParser().summary() == (
            "Sentence Type: \n"
            "Unsupported sentence type.\n"
        )
