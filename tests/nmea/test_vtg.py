"""Tests for VTG field extraction."""

from navnmea.nmea.fields import split_fields
from navnmea.nmea.vtg import parse_vtg


class TestParseVTG:
    """Tests for parse_vtg function."""

    def test_valid_vtg(self):
        result = parse_vtg(split_fields("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48"))
        assert result.track_true == "054.7"
        assert result.track_magnetic == "034.4"
        assert result.speed_knots == "005.5"
        assert result.speed_kmh == "010.2"

    def test_unit_labels_skipped(self):
        result = parse_vtg(split_fields("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48"))
        assert set(vars(result).values()).isdisjoint({"T", "M", "N", "K"})

    def test_vtg_stationary_empty_track(self):
        result = parse_vtg(split_fields("$GPVTG,,T,,M,0.0,N,0.0,K,A"))
        assert result.track_true == ""
        assert result.track_magnetic == ""
        assert result.speed_knots == "0.0"
        assert result.speed_kmh == "0.0"

    def test_vtg_truncated(self):
        result = parse_vtg(split_fields("$GPVTG,054.7,T"))
        assert result.track_true == "054.7"
        assert result.speed_kmh == ""
