################################################################################
# pyisddecoder/isd/temperature.py
#
# Additional data section: extreme, average and dew point temperature groups
# (KA-KG)
#
# TDBA 2026-10-02:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
QUALITY_CODE = Code(1)
################################################################################
# CLASSES
################################################################################
class KAX(Group):
    """
    KA1-KA4 - extreme air temperature

    * period quantity (tenths of hours)
    * code (N = minimum, M = maximum, O = estimated minimum, P = estimated maximum)
    * air temperature
    * quality code
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "h", 10)),
        ("code", Nullable(1)),
        ("air_temperature", Quantity(5, "Cel", 10)),
        ("quality_code", QUALITY_CODE)
    ]
class KCX(Group):
    """
    KC1-KC2 - extreme air temperature for the month
    """
    _COMPONENTS = [
        ("code", Nullable(1)),
        ("condition_code", Nullable(1)),
        ("air_temperature", Quantity(5, "Cel", 10)),
        ("dates_of_occurrence", Nullable(6)),
        ("quality_code", QUALITY_CODE)
    ]
class KDX(Group):
    """
    KD1-KD2 - heating or cooling degree days
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "h")),
        ("code", Nullable(1)),
        ("value", Quantity(4, "degF.day")),
        ("quality_code", QUALITY_CODE)
    ]
class KE1(Group):
    """
    KE1 - number of days with extreme temperatures for the month
    """
    _COMPONENTS = [
        ("days_max_32f_or_less", Quantity(2, "day")),
        ("days_max_32f_or_less_quality_code", QUALITY_CODE),
        ("days_max_90f_or_more", Quantity(2, "day")),
        ("days_max_90f_or_more_quality_code", QUALITY_CODE),
        ("days_min_32f_or_less", Quantity(2, "day")),
        ("days_min_32f_or_less_quality_code", QUALITY_CODE),
        ("days_min_0f_or_less", Quantity(2, "day")),
        ("days_min_0f_or_less_quality_code", QUALITY_CODE)
    ]
class KF1(Group):
    """
    KF1 - hourly calculated temperature
    """
    _COMPONENTS = [
        ("temperature", Quantity(5, "Cel", 10)),
        ("quality_code", QUALITY_CODE)
    ]
class KGX(Group):
    """
    KG1-KG2 - average dew point and wet bulb temperature
    """
    _COMPONENTS = [
        ("period_quantity", Quantity(3, "h")),
        ("code", Nullable(1)),
        ("temperature", Quantity(5, "Cel", 100)),
        ("derived_code", Nullable(1)),
        ("quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [
    ("KA1", KAX), ("KA2", KAX), ("KA3", KAX), ("KA4", KAX),
    ("KC1", KCX), ("KC2", KCX),
    ("KD1", KDX), ("KD2", KDX),
    ("KE1", KE1), ("KF1", KF1),
    ("KG1", KGX), ("KG2", KGX)
]
