################################################################################
# pyisddecoder/isd/marine.py
#
# Additional data section: sea ice and water level groups (WD, WG, WJ)
#
# TDBA 2026-10-03:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
################################################################################
# CLASSES
################################################################################
class WD1(Group):
    """
    WD1 - surface ice observation
    """
    _COMPONENTS = [
        ("edge_bearing_code", Nullable(2)),
        ("uniform_concentration_rate", Quantity(3, "%")),
        ("non_uniform_concentration_code", Nullable(2)),
        ("ship_relative_position_code", Nullable(1)),
        ("ship_penetrability_code", Nullable(1)),
        ("ice_trend_code", Nullable(1)),
        ("development_code", Nullable(2)),
        ("growler_bergy_bit_presence_code", Nullable(1)),
        ("growler_bergy_bit_quantity", Nullable(3, type=int)),
        ("iceberg_quantity", Nullable(3, type=int)),
        ("quality_code", Code(1))
    ]
class WG1(Group):
    """
    WG1 - water surface ice historical observation
    """
    _COMPONENTS = [
        ("edge_bearing_code", Nullable(2)),
        ("edge_distance", Quantity(2, "km")),
        ("edge_orientation_code", Nullable(2)),
        ("formation_type_code", Nullable(2)),
        ("navigation_effect_code", Nullable(2)),
        ("quality_code", Code(1))
    ]
class WJ1(Group):
    """
    WJ1 - water level observation
    """
    _COMPONENTS = [
        ("ice_thickness", Quantity(3, "cm")),
        ("discharge_rate", Quantity(5, "m3/s")),
        ("primary_ice_phenomena_code", Nullable(2)),
        ("secondary_ice_phenomena_code", Nullable(2)),
        ("stage_height", Quantity(5, "cm")),
        ("under_ice_slush_code", Nullable(1)),
        ("water_level_state_code", Nullable(1))
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [("WD1", WD1), ("WG1", WG1), ("WJ1", WJ1)]
