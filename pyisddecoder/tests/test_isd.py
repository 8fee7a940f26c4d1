################################################################################
# pyisddecoder/tests/test_isd.py
#
# Unit tests for ISD records. Requires pytest
#
# TDBA 2026-10-05:
#   * First version
# TDBA 2026-10-12:
#   * Added tests for strict and lenient handling of additional data
# TDBA 2026-10-19:
#   * Added tests for malformed dates and elevations
################################################################################
# CONFIGURATION
################################################################################
import json, logging, re
from datetime import datetime
import pytest
from pyisddecoder import isd, DecodeError, EncodeError, Group, Quantity, Nullable, Value
from pyisddecoder.isd import mandatory, precipitation
BASE = {
    "STATION": "72530094846",
    "DATE": "202001010051",
    "SOURCE": "7",
    "LATITUDE": "41.995",
    "LONGITUDE": "-87.9336",
    "ELEVATION": "201.8",
    "NAME": "CHICAGO OHARE INTERNATIONAL AIRPORT, IL US",
    "REPORT_TYPE": "FM-15",
    "CALL_SIGN": "KORD",
    "QUALITY_CONTROL": "V030",
    "WND": "250,1,N,0046,1",
    "CIG": "22000,1,9,N",
    "VIS": "016093,1,9,9",
    "TMP": "-0056,1",
    "SLP": "10132,1"
}
def fields(**kwargs):
    data = dict(BASE)
    data.update(kwargs)
    return data
################################################################################
# CLASSES
################################################################################
class BaseTestISD:
    """
    Base class for ISD tests
    """
    FIELDS = None
    @pytest.fixture
    def decoded(self):
        record = isd.ISD().decode(self.FIELDS)
        yield isd.ISD().encode(record)
    def pytest_generate_tests(self, metafunc):
        if metafunc.function.__name__ == "test_values":
            metafunc.parametrize("attr", list(self.expected.keys()))

    def test_values(self, decoded, attr):
        if attr not in decoded:
            assert False, "Expected attribute '{}' not present in encoded output".format(attr)
        else:
            assert decoded[attr] == self.expected[attr], "Encoded attribute '{}' does not match expected output".format(attr)

    def test_no_extra_keys(self, decoded):
        assert set(decoded.keys()) == set(self.expected.keys())

    def test_idempotent(self):
        first  = isd.ISD().encode(isd.ISD().decode(self.FIELDS))
        second = isd.ISD().encode(isd.ISD().decode(self.FIELDS))
        assert first == second
class TestMandatoryOnly(BaseTestISD):
    """
    Tests a record with no additional data
    """
    FIELDS = BASE
    expected = {
        "station": "72530094846",
        "date": "202001010051",
        "source": "7",
        "latitude": 41.995,
        "longitude": -87.9336,
        "elevation": 201.8,
        "name": "CHICAGO OHARE INTERNATIONAL AIRPORT, IL US",
        "report_type": "FM-15",
        "call_sign": "KORD",
        "quality_control": "V030",
        "wnd": {
            "direction_angle": { "value": 250, "unit": "deg" },
            "direction_quality_code": "1",
            "type_code": "N",
            "speed_rate": { "value": 4.6, "unit": "m/s" },
            "speed_quality_code": "1"
        },
        "cig": {
            "height_dimension": { "value": 22000, "unit": "m" },
            "quality_code": "1",
            "determination_code": None,
            "cavok_code": "N"
        },
        "vis": {
            "distance_dimension": { "value": 16093, "unit": "m" },
            "distance_quality_code": "1",
            "variability_code": None,
            "variability_quality_code": "9"
        },
        "tmp": {
            "air_temperature": { "value": -5.6, "unit": "Cel" },
            "quality_code": "1"
        },
        "slp": {
            "pressure": { "value": 1013.2, "unit": "hPa" },
            "quality_code": "1"
        }
    }
class TestAdditional(BaseTestISD):
    """
    Tests a record with additional data, including a repeated category with a
    gap in its slots
    """
    FIELDS = fields(
        AA1="01,0000,9,5",
        AA3="06,0025,3,1",
        GA1="07,1,+00884,1,99,9",
        MA1="10135,1,09925,1",
        OC1="0093,1",
        MW1="61,1",
        REM="MET10212/31/19 23:51:02 METAR KORD 010551Z 25009KT 10SM"
    )
    expected = dict(TestMandatoryOnly.expected, **{
        "aa1": {
            "period_quantity": { "value": 1, "unit": "h" },
            "depth_dimension": { "value": 0.0, "unit": "mm" },
            "condition_code": None,
            "quality_code": "5"
        },
        "aa3": {
            "period_quantity": { "value": 6, "unit": "h" },
            "depth_dimension": { "value": 2.5, "unit": "mm" },
            "condition_code": "3",
            "quality_code": "1"
        },
        "ga1": {
            "coverage_code": "07",
            "coverage_quality_code": "1",
            "base_height_dimension": { "value": 884, "unit": "m" },
            "base_height_quality_code": "1",
            "cloud_type_code": None,
            "cloud_type_quality_code": "9"
        },
        "ma1": {
            "altimeter_setting_rate": { "value": 1013.5, "unit": "hPa" },
            "altimeter_quality_code": "1",
            "station_pressure_rate": { "value": 992.5, "unit": "hPa" },
            "station_pressure_quality_code": "1"
        },
        "oc1": {
            "speed_rate": { "value": 9.3, "unit": "m/s" },
            "speed_quality_code": "1"
        },
        "mw1": {
            "condition_code": "61",
            "quality_code": "1"
        }
    })
class TestMissingValues(BaseTestISD):
    """
    Tests a record where every mandatory value is reported as missing
    """
    FIELDS = fields(
        STATION="99999999999",
        SOURCE="9",
        LATITUDE="+99999",
        LONGITUDE="+999999",
        REPORT_TYPE="99999",
        CALL_SIGN="99999",
        WND="999,9,9,9999,9",
        CIG="99999,9,9,9",
        VIS="999999,9,9,9",
        TMP="+9999,9",
        SLP="99999,9"
    )
    expected = dict(TestMandatoryOnly.expected, **{
        "station": None,
        "source": None,
        "latitude": None,
        "longitude": None,
        "report_type": None,
        "call_sign": None,
        "wnd": {
            "direction_angle": None,
            "direction_quality_code": "9",
            "type_code": None,
            "speed_rate": None,
            "speed_quality_code": "9"
        },
        "cig": {
            "height_dimension": None,
            "quality_code": "9",
            "determination_code": None,
            "cavok_code": None
        },
        "vis": {
            "distance_dimension": None,
            "distance_quality_code": "9",
            "variability_code": None,
            "variability_quality_code": "9"
        },
        "tmp": { "air_temperature": None, "quality_code": "9" },
        "slp": { "pressure": None, "quality_code": "9" }
    })
class TestRecord:
    """
    Tests the decoded Record object
    """
    def test_attributes(self):
        record = isd.ISD().decode(fields(AA2="03,0010,9,5"))
        assert record.date == datetime(2020, 1, 1, 0, 51)
        assert record.wnd.speed_rate.value == 4.6
        assert record.wnd.speed_rate.unit == "m/s"
        assert record.slp.pressure.value == 1013.2
        assert isinstance(record.wnd, mandatory.Wind)
        assert isinstance(record.aa2, precipitation.AAX)
        assert record.aa1 is None
        assert record.aa3 is None
        assert record.aa2.depth_dimension.value == 1.0
    def test_additional(self):
        record = isd.ISD().decode(fields(AA4="03,0010,9,5", AA1="01,0000,9,5"))
        assert [code for code, _ in record.additional()] == ["aa1", "aa4"]
    def test_absent_category_omitted(self):
        encoded = isd.ISD().encode(isd.ISD().decode(BASE))
        assert "aa1" not in encoded
        for code in isd.ADDITIONAL:
            assert code.lower() not in encoded
    def test_present_category_included(self):
        encoded = isd.ISD().encode(isd.ISD().decode(fields(AA1="01,0010,9,5")))
        assert encoded["aa1"]["depth_dimension"] == { "value": 1.0, "unit": "mm" }
    def test_empty_field_is_absent(self):
        record = isd.ISD().decode(fields(AA1="", GA1=None))
        assert record.aa1 is None
        assert record.ga1 is None
    def test_output_keys_lower_case(self):
        encoded = isd.ISD().encode(isd.ISD().decode(fields(KA1="120,M,+0156,1")))
        for key in encoded:
            assert key == key.lower()
        assert encoded["ka1"]["air_temperature"] == { "value": 15.6, "unit": "Cel" }
    def test_lower_case_input_not_recognised(self, caplog):
        with caplog.at_level(logging.WARNING):
            record = isd.ISD().decode(fields(aa1="01,0010,9,5"))
        assert record.aa1 is None
        assert "aa1 is not a recognised ISD field" in caplog.text
    def test_equal(self):
        assert isd.ISD().decode(BASE) == isd.ISD().decode(dict(BASE))
    def test_to_json(self):
        data = json.loads(isd.ISD().to_json(isd.ISD().decode(fields(AA1="01,0010,9,5"))))
        assert data["aa1"]["depth_dimension"]["value"] == 1.0
        assert data["date"] == "202001010051"
class TestTimestamp:
    def test_round_trip(self):
        date = datetime(2021, 12, 31, 23, 59)
        assert isd.parse_date(isd.format_date(date)) == date
        assert isd.format_date(isd.parse_date("202001010051")) == "202001010051"
    def test_invalid_date(self):
        with pytest.raises(DecodeError) as e:
            isd.ISD().decode(fields(DATE="2020-01-01T00:51:00"))
        assert e.value.field == "DATE"
    @pytest.mark.parametrize("raw", ["2020111111", "202011111", "20201111111", "2020010100510", "20200101 051", "202013010051"])
    def test_wrong_length_date(self, raw):
        # Single digit months, days, hours or minutes must not be accepted
        with pytest.raises(DecodeError) as e:
            isd.ISD().decode(fields(DATE=raw))
        assert e.value.field == "DATE"
        assert e.value.raw == raw
    def test_parse_date_short(self):
        with pytest.raises(ValueError):
            isd.parse_date("2020111111")
class TestErrors:
    """
    Tests malformed records
    """
    def test_malformed_mandatory(self):
        with pytest.raises(DecodeError) as e:
            isd.ISD().decode(fields(WND="250,1,N,00X6,1"))
        assert e.value.field == "WND"
        assert e.value.raw == "250,1,N,00X6,1"
        assert "WND" in str(e.value)
        assert "00X6" in str(e.value)
    def test_wrong_component_count(self):
        with pytest.raises(DecodeError) as e:
            isd.ISD().decode(fields(TMP="-0056"))
        assert e.value.field == "TMP"
    def test_missing_mandatory(self):
        data = fields()
        del data["SLP"]
        with pytest.raises(DecodeError) as e:
            isd.ISD(strict=False).decode(data)
        assert e.value.field == "SLP"
    def test_malformed_metadata(self):
        with pytest.raises(DecodeError) as e:
            isd.ISD(strict=False).decode(fields(LATITUDE="N41.995"))
        assert e.value.field == "LATITUDE"
    @pytest.mark.parametrize("raw", ["high", "nan", "inf", "-inf", "1e3", "201.8m", ""])
    def test_malformed_elevation(self, raw):
        with pytest.raises(DecodeError) as e:
            isd.ISD().decode(fields(ELEVATION=raw))
        assert e.value.field == "ELEVATION"
    @pytest.mark.parametrize("raw,expected", [("201.8", 201.8), ("-0350", -350.0), ("+9999", 9999.0)])
    def test_elevation(self, raw, expected):
        assert isd.ISD().decode(fields(ELEVATION=raw)).elevation == expected
    def test_malformed_optional_strict(self):
        with pytest.raises(DecodeError) as e:
            isd.ISD().decode(fields(AA1="01,00X0,9,5"))
        assert e.value.field == "AA1"
        assert e.value.raw == "01,00X0,9,5"
    def test_malformed_optional_lenient(self, caplog):
        with caplog.at_level(logging.WARNING):
            record = isd.ISD(strict=False).decode(fields(AA1="01,00X0,9,5", AA2="03,0010,9,5"))
        assert record.aa1 is None
        assert record.aa2.depth_dimension.value == 1.0
        assert "Dropping AA1" in caplog.text
    def test_unknown_field(self, caplog):
        with caplog.at_level(logging.WARNING):
            isd.ISD().decode(fields(ZZ9="1234", REM="SYN004"))
        assert "ZZ9 is not a recognised ISD field" in caplog.text
        assert "REM" not in caplog.text
    def test_encode_exception(self):
        with pytest.raises(EncodeError):
            isd.ISD().encode({ "station": "72530094846" })
class TestFieldTables:
    """
    Checks the slot and component tables are consistent
    """
    def test_slot_count(self):
        assert len(isd.ADDITIONAL) == 183
    @pytest.mark.parametrize("code", list(isd.ADDITIONAL.keys()))
    def test_slot(self, code):
        group = isd.ADDITIONAL[code]
        assert re.match("^[A-Z]{2}[1-9]$", code)
        assert issubclass(group, Group)
        assert len(group._COMPONENTS) > 0
        names = [name for name, _ in group._COMPONENTS]
        assert len(names) == len(set(names))
        for _, component in group._COMPONENTS:
            if isinstance(component, Quantity):
                assert component.divisor != 0
    @pytest.mark.parametrize("code", list(isd.ADDITIONAL.keys()))
    def test_all_missing(self, code):
        # A group where every component is filled with 9s decodes without error
        group = isd.ADDITIONAL[code]
        raw = ",".join("9" * (component.width or 1) for _, component in group._COMPONENTS)
        decoded = group.decode(raw)
        for name, component in group._COMPONENTS:
            if isinstance(component, Quantity):
                assert getattr(decoded, name) is None
            elif isinstance(component, Nullable) and component.sentinel == "9" * component.width:
                assert getattr(decoded, name) == Value(None), "{} {} is not missing".format(code, name)
    def test_shared_class_for_repeats(self):
        assert isd.ADDITIONAL["AA1"] is isd.ADDITIONAL["AA4"]
        assert isd.ADDITIONAL["AU9"] is isd.ADDITIONAL["AU1"]
        assert isd.ADDITIONAL["CO1"] is not isd.ADDITIONAL["CO2"]
        assert isd.ADDITIONAL["CO2"] is isd.ADDITIONAL["CO9"]
