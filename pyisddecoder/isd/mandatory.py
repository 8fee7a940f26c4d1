################################################################################
# pyisddecoder/isd/mandatory.py
#
# Mandatory data section groups. These are present in every record
#
# TDBA 2026-09-28:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
################################################################################
# CLASSES
################################################################################
class Wind(Group):
    """
    WND - wind observation

    * direction angle (degrees clockwise from true north)
    * direction quality code
    * type code (e.g. N = normal, C = calm, V = variable)
    * speed rate
    * speed quality code
    """
    _COMPONENTS = [
        ("direction_angle", Quantity(3, "deg")),
        ("direction_quality_code", Code(1)),
        ("type_code", Nullable(1)),
        ("speed_rate", Quantity(4, "m/s", 10)),
        ("speed_quality_code", Code(1))
    ]
class Ceiling(Group):
    """
    CIG - sky condition observation

    * height of the lowest cloud layer covering 5/8 or more of the sky
    * quality code
    * determination code
    * CAVOK code (ceiling and visibility OK)
    """
    _COMPONENTS = [
        ("height_dimension", Quantity(5, "m")),
        ("quality_code", Code(1)),
        ("determination_code", Nullable(1)),
        ("cavok_code", Nullable(1))
    ]
class Visibility(Group):
    """
    VIS - visibility observation
    """
    _COMPONENTS = [
        ("distance_dimension", Quantity(6, "m")),
        ("distance_quality_code", Code(1)),
        ("variability_code", Nullable(1)),
        ("variability_quality_code", Code(1))
    ]
class Temperature(Group):
    """
    TMP - air temperature observation
    """
    _COMPONENTS = [
        ("air_temperature", Quantity(5, "Cel", 10)),
        ("quality_code", Code(1))
    ]
class SeaLevelPressure(Group):
    """
    SLP - atmospheric pressure observation, reduced to sea level
    """
    _COMPONENTS = [
        ("pressure", Quantity(5, "hPa", 10)),
        ("quality_code", Code(1))
    ]
