################################################################################
# pyisddecoder/isd/climate_reference_network.py
#
# Additional data section: US Climate Reference Network groups (CB-CN)
#
# TDBA 2026-09-30:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Quantity
QUALITY_CODE = Code(1)
FLAG         = Code(1)
################################################################################
# FUNCTIONS
################################################################################
def measured(name, quantity):
    """
    Returns the components for a CRN measurement: the value, its quality code
    and its quality flag
    """
    return [
        (name, quantity),
        ("{}_quality_code".format(name), QUALITY_CODE),
        ("{}_flag".format(name), FLAG)
    ]
################################################################################
# CLASSES
################################################################################
class CBX(Group):
    """
    CB1-CB2 - subhourly observed liquid precipitation, secondary sensor
    """
    _COMPONENTS = [("period_quantity", Quantity(2, "min"))] + \
        measured("precipitation_depth", Quantity(6, "mm", 10))
class CFX(Group):
    """
    CF1-CF3 - hourly fan speed
    """
    _COMPONENTS = measured("fan_speed", Quantity(4, "rps", 10))
class CGX(Group):
    """
    CG1-CG3 - subhourly observed liquid precipitation, primary sensor
    """
    _COMPONENTS = measured("precipitation_depth", Quantity(6, "mm", 10))
class CHX(Group):
    """
    CH1-CH2 - relative humidity and temperature
    """
    _COMPONENTS = [("period_quantity", Quantity(2, "min"))] + \
        measured("average_air_temperature", Quantity(5, "Cel", 10)) + \
        measured("average_relative_humidity", Quantity(4, "%", 10))
class CI1(Group):
    """
    CI1 - hourly relative humidity and temperature statistics
    """
    _COMPONENTS = \
        measured("minimum_rh_temperature", Quantity(5, "Cel", 10)) + \
        measured("maximum_rh_temperature", Quantity(5, "Cel", 10)) + \
        measured("std_rh_temperature", Quantity(5, "Cel", 10)) + \
        measured("std_relative_humidity", Quantity(5, "%", 10))
class CN1(Group):
    """
    CN1 - battery voltage
    """
    _COMPONENTS = \
        measured("average_voltage", Quantity(4, "V", 10)) + \
        measured("full_load_voltage", Quantity(4, "V", 10)) + \
        measured("datalogger_voltage", Quantity(4, "V", 10))
class CN2(Group):
    """
    CN2 - diagnostic equipment temperatures and door open time
    """
    _COMPONENTS = \
        measured("equipment_temperature", Quantity(5, "Cel", 10)) + \
        measured("geonor_inlet_maximum_temperature", Quantity(5, "Cel", 10)) + \
        measured("door_open_time", Quantity(2, "min"))
class CN3(Group):
    """
    CN3 - secondary diagnostics
    """
    _COMPONENTS = \
        measured("reference_resistor_average_resistance", Quantity(6, "ohm", 10)) + \
        measured("datalogger_signature_id", Quantity(6, ""))
class CN4(Group):
    """
    CN4 - secondary hourly diagnostics
    """
    _COMPONENTS = \
        measured("precipitation_gauge_heater_flag", Code(1)) + \
        measured("datalogger_door_flag", Code(1)) + \
        measured("forward_transmitter_rf_power", Quantity(3, "W", 10)) + \
        measured("reflected_transmitter_rf_power", Quantity(3, "W", 10))
################################################################################
# SLOTS
################################################################################
SLOTS = [
    ("CB1", CBX), ("CB2", CBX),
    ("CF1", CFX), ("CF2", CFX), ("CF3", CFX),
    ("CG1", CGX), ("CG2", CGX), ("CG3", CGX),
    ("CH1", CHX), ("CH2", CHX),
    ("CI1", CI1), ("CN1", CN1), ("CN2", CN2), ("CN3", CN3), ("CN4", CN4)
]
