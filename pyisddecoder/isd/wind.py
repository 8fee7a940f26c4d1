################################################################################
# pyisddecoder/isd/wind.py
#
# Additional data section: supplementary wind and relative humidity groups
# (OA-OE, RH)
#
# TDBA 2026-10-03:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
from .climate_reference_network import measured
QUALITY_CODE = Code(1)
################################################################################
# CLASSES
################################################################################
class OAX(Group):
    """
    OA1-OA5 - supplementary wind observation
    """
    _COMPONENTS = [
        ("type_code", Nullable(1)),
        ("period_quantity", Quantity(2, "h")),
        ("speed_rate", Quantity(4, "m/s", 10)),
        ("speed_quality_code", QUALITY_CODE)
    ]
class OBX(Group):
    """
    OB1-OB2 - hourly and subhourly wind section
    """
    _COMPONENTS = [("period_quantity", Quantity(3, "min"))] + \
        measured("maximum_gust", Quantity(4, "m/s", 10)) + \
        measured("maximum_gust_direction", Quantity(3, "deg")) + \
        measured("std_speed", Quantity(5, "m/s", 100)) + \
        measured("std_direction", Quantity(5, "deg", 100))
class OC1(Group):
    """
    OC1 - wind gust observation
    """
    _COMPONENTS = [
        ("speed_rate", Quantity(4, "m/s", 10)),
        ("speed_quality_code", QUALITY_CODE)
    ]
class ODX(Group):
    """
    OD1-OD3 - supplementary wind observation (with direction)
    """
    _COMPONENTS = [
        ("type_code", Nullable(1)),
        ("period_quantity", Quantity(2, "h")),
        ("speed_rate", Quantity(4, "m/s", 10)),
        ("speed_quality_code", QUALITY_CODE),
        ("direction_quantity", Quantity(3, "deg"))
    ]
class OEX(Group):
    """
    OE1-OE3 - summary of day wind observation. Time of occurrence is HHMM
    """
    _COMPONENTS = [
        ("type_code", Nullable(1)),
        ("period_quantity", Quantity(2, "h")),
        ("speed_rate", Quantity(5, "m/s", 100)),
        ("direction", Quantity(3, "deg")),
        ("time_of_occurrence", Nullable(4)),
        ("quality_code", QUALITY_CODE)
    ]
class RHX(Group):
    """
    RH1-RH2 - relative humidity

    * period quantity
    * code (M = mean, N = minimum, X = maximum)
    * relative humidity percentage
    * derived code
    * quality code
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "h")),
        ("code", Nullable(1)),
        ("percentage", Quantity(3, "%")),
        ("derived_code", Nullable(1)),
        ("quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = (
    [("OA{}".format(i), OAX) for i in range(1, 6)] +
    [("OB1", OBX), ("OB2", OBX), ("OC1", OC1)] +
    [("OD{}".format(i), ODX) for i in range(1, 4)] +
    [("OE{}".format(i), OEX) for i in range(1, 4)] +
    [("RH1", RHX), ("RH2", RHX)]
)
