################################################################################
# pyisddecoder/isd/precipitation.py
#
# Additional data section: precipitation and snow groups (AA-AO)
#
# TDBA 2026-09-29:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
################################################################################
# SHARED COMPONENTS
################################################################################
CONDITION_CODE = Nullable(1)
QUALITY_CODE   = Code(1)
################################################################################
# CLASSES
################################################################################
class AAX(Group):
    """
    AA1-AA4 - liquid precipitation occurrence
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(2, "h")),
        ("depth_dimension", Quantity(4, "mm", 10)),
        ("condition_code", CONDITION_CODE),
        ("quality_code", QUALITY_CODE)
    ]
class AB1(Group):
    """
    AB1 - liquid precipitation, monthly total
    """
    _COMPONENTS = [
        ("depth_dimension", Quantity(5, "mm", 10)),
        ("condition_code", CONDITION_CODE),
        ("quality_code", QUALITY_CODE)
    ]
class AC1(Group):
    """
    AC1 - precipitation observation history
    """
    _COMPONENTS = [
        ("duration_code", Nullable(1)),
        ("characteristic_code", Nullable(1)),
        ("quality_code", QUALITY_CODE)
    ]
class AD1(Group):
    """
    AD1 - liquid precipitation, greatest amount in 24 hours for the month.
    Dates are reported as DDHH and up to three are given
    """
    _COMPONENTS = [
        ("depth_dimension", Quantity(5, "mm", 10)),
        ("condition_code", CONDITION_CODE),
        ("dates_of_occurrence_1", Nullable(4)),
        ("dates_of_occurrence_2", Nullable(4)),
        ("dates_of_occurrence_3", Nullable(4)),
        ("quality_code", QUALITY_CODE)
    ]
class AE1(Group):
    """
    AE1 - liquid precipitation, number of days with specific amounts for the
    month
    """
    _COMPONENTS = [
        ("days_001_inch", Quantity(2, "day")),
        ("days_001_inch_quality_code", QUALITY_CODE),
        ("days_010_inch", Quantity(2, "day")),
        ("days_010_inch_quality_code", QUALITY_CODE),
        ("days_050_inch", Quantity(2, "day")),
        ("days_050_inch_quality_code", QUALITY_CODE),
        ("days_100_inch", Quantity(2, "day")),
        ("days_100_inch_quality_code", QUALITY_CODE)
    ]
class AG1(Group):
    """
    AG1 - precipitation estimated observation
    """
    _COMPONENTS = [
        ("discrepancy_code", Nullable(1)),
        ("estimated_water_depth", Quantity(3, "mm"))
    ]
class AHX(Group):
    """
    AH1-AH6 - liquid precipitation, maximum short duration for the month
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "min")),
        ("depth_dimension", Quantity(4, "mm", 10)),
        ("condition_code", CONDITION_CODE),
        ("end_date_time", Nullable(6)),
        ("quality_code", QUALITY_CODE)
    ]
class AIX(Group):
    """
    AI1-AI6 - liquid precipitation, maximum short duration for the month
    (second set of periods)
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "min")),
        ("depth_dimension", Quantity(4, "mm", 10)),
        ("condition_code", CONDITION_CODE),
        ("end_date_time", Nullable(6)),
        ("quality_code", QUALITY_CODE)
    ]
class AJ1(Group):
    """
    AJ1 - snow depth and its liquid water equivalent
    """
    _COMPONENTS = [
        ("depth_dimension", Quantity(4, "cm")),
        ("condition_code", CONDITION_CODE),
        ("quality_code", QUALITY_CODE),
        ("equivalent_water_depth", Quantity(6, "mm", 10)),
        ("equivalent_water_condition_code", CONDITION_CODE),
        ("equivalent_water_quality_code", QUALITY_CODE)
    ]
class AK1(Group):
    """
    AK1 - snow depth, greatest depth on the ground for the month
    """
    _COMPONENTS = [
        ("depth_dimension", Quantity(4, "cm")),
        ("condition_code", CONDITION_CODE),
        ("dates_of_occurrence", Nullable(6)),
        ("quality_code", QUALITY_CODE)
    ]
class ALX(Group):
    """
    AL1-AL4 - snow accumulation
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(2, "h")),
        ("depth_dimension", Quantity(3, "cm")),
        ("condition_code", CONDITION_CODE),
        ("quality_code", QUALITY_CODE)
    ]
class AM1(Group):
    """
    AM1 - snow accumulation, greatest amount in 24 hours for the month
    """
    _COMPONENTS = [
        ("depth_dimension", Quantity(4, "cm", 10)),
        ("condition_code", CONDITION_CODE),
        ("dates_of_occurrence_1", Nullable(4)),
        ("dates_of_occurrence_2", Nullable(4)),
        ("dates_of_occurrence_3", Nullable(4)),
        ("quality_code", QUALITY_CODE)
    ]
class AN1(Group):
    """
    AN1 - snow accumulation for the day or month
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "h")),
        ("depth_dimension", Quantity(4, "cm", 10)),
        ("condition_code", CONDITION_CODE),
        ("quality_code", QUALITY_CODE)
    ]
class AOX(Group):
    """
    AO1-AO4 - liquid precipitation in minutes
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(2, "min")),
        ("depth_dimension", Quantity(4, "mm", 10)),
        ("condition_code", CONDITION_CODE),
        ("quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [
    ("AA1", AAX), ("AA2", AAX), ("AA3", AAX), ("AA4", AAX),
    ("AB1", AB1), ("AC1", AC1), ("AD1", AD1), ("AE1", AE1), ("AG1", AG1),
    ("AH1", AHX), ("AH2", AHX), ("AH3", AHX), ("AH4", AHX), ("AH5", AHX), ("AH6", AHX),
    ("AI1", AIX), ("AI2", AIX), ("AI3", AIX), ("AI4", AIX), ("AI5", AIX), ("AI6", AIX),
    ("AJ1", AJ1), ("AK1", AK1),
    ("AL1", ALX), ("AL2", ALX), ("AL3", ALX), ("AL4", ALX),
    ("AM1", AM1), ("AN1", AN1),
    ("AO1", AOX), ("AO2", AOX), ("AO3", AOX), ("AO4", AOX)
]
