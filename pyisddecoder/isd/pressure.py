################################################################################
# pyisddecoder/isd/pressure.py
#
# Additional data section: pressure groups (MA-MK)
#
# TDBA 2026-10-02:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
QUALITY_CODE = Code(1)
PRESSURE     = Quantity(5, "hPa", 10)
################################################################################
# CLASSES
################################################################################
class MA1(Group):
    """
    MA1 - atmospheric pressure observation (altimeter setting and station
    pressure)
    """
    _COMPONENTS = [
        ("altimeter_setting_rate", PRESSURE),
        ("altimeter_quality_code", QUALITY_CODE),
        ("station_pressure_rate", PRESSURE),
        ("station_pressure_quality_code", QUALITY_CODE)
    ]
class MD1(Group):
    """
    MD1 - atmospheric pressure change
    """
    _COMPONENTS = [
        ("tendency_code", Nullable(1)),
        ("tendency_quality_code", QUALITY_CODE),
        ("three_hour_quantity", Quantity(3, "hPa", 10)),
        ("three_hour_quality_code", QUALITY_CODE),
        ("twenty_four_hour_quantity", Quantity(4, "hPa", 10)),
        ("twenty_four_hour_quality_code", QUALITY_CODE)
    ]
class ME1(Group):
    """
    ME1 - geopotential height isobaric level
    """
    _COMPONENTS = [
        ("level_code", Nullable(1)),
        ("height_dimension", Quantity(4, "m")),
        ("height_quality_code", QUALITY_CODE)
    ]
class MF1(Group):
    """
    MF1 - average station pressure and sea level pressure for the day
    """
    _COMPONENTS = [
        ("average_station_pressure", PRESSURE),
        ("average_station_pressure_quality_code", QUALITY_CODE),
        ("average_sea_level_pressure", PRESSURE),
        ("average_sea_level_pressure_quality_code", QUALITY_CODE)
    ]
class MG1(Group):
    """
    MG1 - average station pressure and minimum sea level pressure for the day
    """
    _COMPONENTS = [
        ("average_station_pressure", PRESSURE),
        ("average_station_pressure_quality_code", QUALITY_CODE),
        ("minimum_sea_level_pressure", PRESSURE),
        ("minimum_sea_level_pressure_quality_code", QUALITY_CODE)
    ]
class MH1(Group):
    """
    MH1 - average station pressure and sea level pressure for the month
    """
    _COMPONENTS = [
        ("average_station_pressure", PRESSURE),
        ("average_station_pressure_quality_code", QUALITY_CODE),
        ("average_sea_level_pressure", PRESSURE),
        ("average_sea_level_pressure_quality_code", QUALITY_CODE)
    ]
class MK1(Group):
    """
    MK1 - maximum and minimum sea level pressure for the month. Dates are
    reported as DDHHMM
    """
    _COMPONENTS = [
        ("maximum_sea_level_pressure", PRESSURE),
        ("maximum_sea_level_pressure_date_time", Nullable(6)),
        ("maximum_sea_level_pressure_quality_code", QUALITY_CODE),
        ("minimum_sea_level_pressure", PRESSURE),
        ("minimum_sea_level_pressure_date_time", Nullable(6)),
        ("minimum_sea_level_pressure_quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [
    ("MA1", MA1), ("MD1", MD1), ("ME1", ME1), ("MF1", MF1),
    ("MG1", MG1), ("MH1", MH1), ("MK1", MK1)
]
