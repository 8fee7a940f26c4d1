################################################################################
# pyisddecoder/isd/network_metadata.py
#
# Additional data section: network metadata and CRN control/temperature groups
# (CO-CX)
#
# TDBA 2026-09-30:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Nullable, Quantity
from .climate_reference_network import measured
################################################################################
# CLASSES
################################################################################
class CO1(Group):
    """
    CO1 - climate division number and UTC to LST time conversion
    """
    _COMPONENTS = [
        ("climate_division_number", Nullable(2, type=int)),
        ("utc_lst_conversion", Quantity(3, "h"))
    ]
class COX(Group):
    """
    CO2-CO9 - element identifier and its time offset from the observation
    """
    _COMPONENTS = [
        ("element_id", Nullable(3)),
        ("time_offset", Quantity(5, "min"))
    ]
class CR1(Group):
    """
    CR1 - control section, datalogger version number
    """
    _COMPONENTS = measured("datalogger_version_number", Quantity(5, "", 1000))
class CTX(Group):
    """
    CT1-CT3 - subhourly temperature
    """
    _COMPONENTS = measured("average_air_temperature", Quantity(5, "Cel", 10))
class CUX(Group):
    """
    CU1-CU3 - hourly temperature and its standard deviation
    """
    _COMPONENTS = \
        measured("average_air_temperature", Quantity(5, "Cel", 10)) + \
        measured("temperature_std", Quantity(4, "Cel", 10))
class CVX(Group):
    """
    CV1-CV3 - hourly temperature extremes. Times are reported as HHMM
    """
    _COMPONENTS = \
        measured("minimum_air_temperature", Quantity(5, "Cel", 10)) + \
        measured("minimum_air_temperature_time", Nullable(4)) + \
        measured("maximum_air_temperature", Quantity(5, "Cel", 10)) + \
        measured("maximum_air_temperature_time", Nullable(4))
class CW1(Group):
    """
    CW1 - subhourly wetness
    """
    _COMPONENTS = \
        measured("wet1_indicator", Quantity(5, "", 10)) + \
        measured("wet2_indicator", Quantity(5, "", 10))
class CXX(Group):
    """
    CX1-CX3 - hourly Geonor vibrating wire summary
    """
    _COMPONENTS = \
        measured("precipitation", Quantity(6, "mm", 10)) + \
        measured("frequency_average", Quantity(4, "Hz")) + \
        measured("frequency_minimum", Quantity(4, "Hz")) + \
        measured("frequency_maximum", Quantity(4, "Hz"))
################################################################################
# SLOTS
################################################################################
SLOTS = [("CO1", CO1)] + [("CO{}".format(i), COX) for i in range(2, 10)] + [
    ("CR1", CR1),
    ("CT1", CTX), ("CT2", CTX), ("CT3", CTX),
    ("CU1", CUX), ("CU2", CUX), ("CU3", CUX),
    ("CV1", CVX), ("CV2", CVX), ("CV3", CVX),
    ("CW1", CW1),
    ("CX1", CXX), ("CX2", CXX), ("CX3", CXX)
]
