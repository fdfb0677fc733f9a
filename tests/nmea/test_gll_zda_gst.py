"""Tests for GLL, ZDA and GST field extraction."""

from navnmea.nmea.fields import split_fields
from navnmea.nmea.gll import parse_gll
from navnmea.nmea.gst import parse_gst
from navnmea.nmea.zda import parse_zda
from tests.helpers import ZDA_SENTENCE


class TestParseGLL:
    """Tests for parse_gll function."""

    def test_valid_gll(self):
        result = parse_gll(split_fields("$GPGLL,4916.45,N,12311.12,W,225444,A*1D"))
        assert result.latitude == "4916.45"
        assert result.lat_dir == "N"
        assert result.longitude == "12311.12"
        assert result.lon_dir == "W"
        assert result.time == "225444"
        assert result.status == "A"

    def test_stray_asterisk_stripped_from_status(self):
        result = parse_gll(["$GPGLL", "4916.45", "N", "12311.12", "W", "225444", "A*"])
        assert result.status == "A"

    def test_truncated(self):
        result = parse_gll(split_fields("$GPGLL,4916.45,N"))
        assert result.longitude == ""
        assert result.status == ""


class TestParseZDA:
    """Tests for parse_zda function."""

    def test_valid_zda(self):
        result = parse_zda(split_fields(ZDA_SENTENCE))
        assert result.time == "201530.00"
        assert result.day == "04"
        assert result.month == "07"
        assert result.year == "2002"

    def test_local_zone_not_decoded(self):
        result = parse_zda(split_fields(ZDA_SENTENCE))
        assert list(vars(result)) == ["time", "day", "month", "year"]


class TestParseGST:
    """Tests for parse_gst function."""

    def test_valid_gst(self):
        result = parse_gst(
            split_fields("$GPGST,024603.00,1.2,0.8,1.0,45.0,0.5,0.6,0.7*5A")
        )
        assert result.time == "024603.00"
        assert result.rms == "1.2"
        assert result.sigma_major == "0.8"
        assert result.sigma_minor == "1.0"
        assert result.orientation == "45.0"
        assert result.sigma_lat == "0.5"
        assert result.sigma_lon == "0.6"
        assert result.sigma_alt == "0.7"

    def test_stray_asterisk_stripped_from_sigma_alt(self):
        fields = ["$GPGST", "024603.00", "1.2", "0.8", "1.0", "45.0", "0.5", "0.6", "0.7*"]
        assert parse_gst(fields).sigma_alt == "0.7"

    def test_missing_sigmas(self):
        result = parse_gst(split_fields("$GPGST,024603.00,1.2"))
        assert result.sigma_major == ""
        assert result.sigma_alt == ""
