################################################################################
# pyisddecoder/isd/ground_surface.py
#
# Additional data section: ground surface groups (IA-IC)
#
# TDBA 2026-10-01:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
from .climate_reference_network import measured
QUALITY_CODE   = Code(1)
CONDITION_CODE = Nullable(1)
################################################################################
# CLASSES
################################################################################
class IA1(Group):
    """
    IA1 - ground surface observation
    """
    _COMPONENTS = [
        ("observation_code", Nullable(2)),
        ("observation_quality_code", QUALITY_CODE)
    ]
class IA2(Group):
    """
    IA2 - ground surface minimum temperature
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "h", 10)),
        ("minimum_temperature", Quantity(5, "Cel", 10)),
        ("minimum_temperature_quality_code", QUALITY_CODE)
    ]
class IB1(Group):
    """
    IB1 - hourly surface temperature
    """
    _COMPONENTS = \
        measured("surface_temperature", Quantity(5, "Cel", 10)) + \
        measured("minimum_surface_temperature", Quantity(5, "Cel", 10)) + \
        measured("maximum_surface_temperature", Quantity(5, "Cel", 10)) + \
        measured("std_surface_temperature", Quantity(4, "Cel", 10))
class IC1(Group):
    """
    IC1 - ground surface observation, pan evaporation
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(2, "h")),
        ("wind_movement", Quantity(4, "km")),
        ("wind_movement_condition_code", CONDITION_CODE),
        ("wind_movement_quality_code", QUALITY_CODE),
        ("evaporation", Quantity(3, "mm", 100)),
        ("evaporation_condition_code", CONDITION_CODE),
        ("evaporation_quality_code", QUALITY_CODE),
        ("maximum_pan_water_temperature", Quantity(4, "Cel", 10)),
        ("maximum_pan_water_temperature_condition_code", CONDITION_CODE),
        ("maximum_pan_water_temperature_quality_code", QUALITY_CODE),
        ("minimum_pan_water_temperature", Quantity(4, "Cel", 10)),
        ("minimum_pan_water_temperature_condition_code", CONDITION_CODE),
        ("minimum_pan_water_temperature_quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [("IA1", IA1), ("IA2", IA2), ("IB1", IB1), ("IC1", IC1)]
