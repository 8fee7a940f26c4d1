################################################################################
# pyisddecoder/isd/weather_occurrence.py
#
# Additional data section: present and past weather groups (AT-AZ, MW)
#
# TDBA 2026-09-29:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
QUALITY_CODE = Code(1)
################################################################################
# CLASSES
################################################################################
class ATX(Group):
    """
    AT1-AT8 - daily present weather observation
    """
    _COMPONENTS = [
        ("source_element", Nullable(2, sentinel="")),
        ("weather_type", Nullable(2, type=int)),
        ("abbreviation", Nullable(4, sentinel="")),
        ("quality_code", QUALITY_CODE)
    ]
class AUX(Group):
    """
    AU1-AU9 - present weather observation, reported in METAR style components
    """
    _COMPONENTS = [
        ("intensity_code", Nullable(1)),
        ("descriptor_code", Nullable(1)),
        ("precipitation_code", Nullable(2)),
        ("obscuration_code", Nullable(1)),
        ("other_weather_code", Nullable(1)),
        ("combination_indicator_code", Nullable(1)),
        ("quality_code", QUALITY_CODE)
    ]
# Automated and manual weather codes run 00-99 (or 0-9) with no missing
# value, so these are kept as reported
class AWX(Group):
    """
    AW1-AW4 - present weather observation, automated
    """
    _COMPONENTS = [
        ("condition_code", Code(2)),
        ("quality_code", QUALITY_CODE)
    ]
class AXX(Group):
    """
    AX1-AX6 - past weather observation, summary of day
    """
    _COMPONENTS = [
        ("condition_code", Nullable(2)),
        ("condition_quality_code", QUALITY_CODE),
        ("period_quantity", Quantity(2, "h")),
        ("period_quality_code", QUALITY_CODE)
    ]
class AYX(Group):
    """
    AY1-AY2 - past weather observation, manual
    """
    _COMPONENTS = [
        ("condition_code", Code(1)),
        ("condition_quality_code", QUALITY_CODE),
        ("period_quantity", Quantity(2, "h")),
        ("period_quality_code", QUALITY_CODE)
    ]
class AZX(Group):
    """
    AZ1-AZ2 - past weather observation, automated
    """
    _COMPONENTS = [
        ("condition_code", Code(1)),
        ("condition_quality_code", QUALITY_CODE),
        ("period_quantity", Quantity(2, "h")),
        ("period_quality_code", QUALITY_CODE)
    ]
class MWX(Group):
    """
    MW1-MW7 - present weather observation, manual
    """
    _COMPONENTS = [
        ("condition_code", Code(2)),
        ("quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = (
    [("AT{}".format(i), ATX) for i in range(1, 9)] +
    [("AU{}".format(i), AUX) for i in range(1, 10)] +
    [("AW{}".format(i), AWX) for i in range(1, 5)] +
    [("AX{}".format(i), AXX) for i in range(1, 7)] +
    [("AY{}".format(i), AYX) for i in range(1, 3)] +
    [("AZ{}".format(i), AZX) for i in range(1, 3)] +
    [("MW{}".format(i), MWX) for i in range(1, 8)]
)
