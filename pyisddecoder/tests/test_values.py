################################################################################
# pyisddecoder/tests/test_values.py
#
# Unit tests for the value and component classes. Requires pytest
#
# TDBA 2026-10-05:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pytest
from pyisddecoder import Value, RecordValue, Nullable, Quantity, Code, InvalidValue
from pyisddecoder import conversion
################################################################################
# CLASSES
################################################################################
class TestValue:
    """
    Tests values which are missing when they equal a sentinel
    """
    @pytest.mark.parametrize("raw,sentinel,type", [
        ("99999", "99999", str),
        ("+99999", ("+99999", "99999"), float),
        ("99999", ("+99999", "99999"), float),
        ("9", "9", int),
    ])
    def test_sentinel(self, raw, sentinel, type):
        assert Value.decode(raw, sentinel, type=type) == Value(None)
    def test_present(self):
        assert Value.decode("41.995", "+99999", type=float).value == 41.995
        assert Value.decode("N", "9").value == "N"
    def test_sentinel_must_match_exactly(self):
        # 999 is not the sentinel for a 4 character field
        assert Value.decode("999", "9999", type=int).value == 999
    def test_invalid(self):
        with pytest.raises(InvalidValue):
            Value.decode("4X.9", "+99999", type=float)
    def test_encode(self):
        assert Value("KORD").encode() == "KORD"
        assert Value(None).encode() is None
class TestRecordValue:
    """
    Tests scaled values which are missing when they contain nothing but 9s
    """
    @pytest.mark.parametrize("raw", ["9", "99", "9999", "99999", "+9999", "999999", "+", ""])
    def test_missing(self, raw):
        assert RecordValue.decode(raw, "m/s", 10) is None
    def test_wind_speed(self):
        assert RecordValue.decode("0500", "m/s", 10) == RecordValue(50.0, "m/s")
        assert RecordValue.decode("9999", "m/s", 10) is None
    def test_sea_level_pressure(self):
        assert RecordValue.decode("10132", "hPa", 10) == RecordValue(1013.2, "hPa")
        assert RecordValue.decode("99999", "hPa", 10) is None
    def test_signed(self):
        assert RecordValue.decode("-0056", "Cel", 10) == RecordValue(-5.6, "Cel")
        assert RecordValue.decode("+0150", "Cel", 10) == RecordValue(15.0, "Cel")
    def test_nines_with_other_digit(self):
        assert RecordValue.decode("0999", "mm", 10).value == 99.9
    def test_unscaled(self):
        value = RecordValue.decode("250", "deg", 1, type=int)
        assert value.value == 250
        assert isinstance(value.value, int)
    def test_invalid(self):
        with pytest.raises(InvalidValue):
            RecordValue.decode("00X6", "m/s", 10)
    def test_encode(self):
        assert RecordValue(4.6, "m/s").encode() == { "value": 4.6, "unit": "m/s" }
class TestNullStrategies:
    """
    The two missing value checks are different: a Value is only missing if it
    matches its sentinel, a RecordValue is missing if it is all 9s
    """
    def test_short_nines(self):
        assert Nullable(4, type=int).decode("999").value == 999
        assert Quantity(4, "mm").decode("999") is None
    def test_default_sentinel(self):
        assert Nullable(3).sentinel == "999"
        assert Nullable(3).decode("999") == Value(None)
    def test_code_kept(self):
        assert Code(1).decode("9") == "9"
class TestQuantity:
    def test_type(self):
        assert Quantity(3, "deg").type is int
        assert Quantity(4, "m/s", 10).type is float
    def test_decode(self):
        assert Quantity(4, "m/s", 10).decode("0046") == RecordValue(4.6, "m/s")
class TestConversion:
    def test_temperature(self):
        assert RecordValue(100.0, "Cel").to("degF") == RecordValue(212.0, "degF")
        assert RecordValue(0.0, "Cel").to("K").value == pytest.approx(273.15)
        assert RecordValue(32.0, "degF").to("Cel").value == pytest.approx(0.0)
        assert RecordValue(273.15, "K").to("degF").value == pytest.approx(32.0)
    def test_same_unit(self):
        assert RecordValue(4.6, "m/s").to("m/s") == RecordValue(4.6, "m/s")
    def test_speed(self):
        assert RecordValue(10.0, "m/s").to("km/h").value == pytest.approx(36.0)
        assert RecordValue(10.0, "KT").to("m/s").value == pytest.approx(5.1444)
    def test_pressure(self):
        assert RecordValue(1013.2, "hPa").to("Pa").value == pytest.approx(101320)
    def test_length(self):
        assert RecordValue(16093, "m").to("km").value == pytest.approx(16.093)
        assert RecordValue(25.4, "mm").to("cm").value == pytest.approx(2.54)
    def test_time(self):
        assert RecordValue(90, "min").to("h").value == pytest.approx(1.5)
    def test_incompatible(self):
        with pytest.raises(conversion.ConversionError):
            RecordValue(10.0, "m/s").to("hPa")
        with pytest.raises(conversion.ConversionError):
            RecordValue(10.0, "W/m2").to("W")
        with pytest.raises(conversion.ConversionError):
            conversion.convert(10.0, "m/s", "mph")
