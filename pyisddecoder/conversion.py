################################################################################
# pyisddecoder/conversion.py
#
# Conversion functions for pyisddecoder
#
# TDBA 2026-09-28:
#   * First version
# TDBA 2026-10-19:
#   * Single table of the units ISD values are reported in
################################################################################
# CONFIGURATION
################################################################################
# Unit: (quantity, scale, offset), where value = (base * scale) + offset.
# Base units are Cel, m/s, Pa, m and s
UNITS = {
    "Cel":  ("temperature", 1, 0),
    "degF": ("temperature", 1.8, 32),
    "K":    ("temperature", 1, 273.15),
    "m/s":  ("speed", 1, 0),
    "KT":   ("speed", 1 / 0.51444, 0),
    "km/h": ("speed", 3.6, 0),
    "Pa":   ("pressure", 1, 0),
    "hPa":  ("pressure", 0.01, 0),
    "kPa":  ("pressure", 0.001, 0),
    "mm":   ("length", 1000, 0),
    "cm":   ("length", 100, 0),
    "m":    ("length", 1, 0),
    "km":   ("length", 0.001, 0),
    "s":    ("time", 1, 0),
    "min":  ("time", 1 / 60, 0),
    "h":    ("time", 1 / 3600, 0),
    "day":  ("time", 1 / 86400, 0)
}
################################################################################
# EXCEPTION CLASSES
################################################################################
class ConversionError(Exception):
    def __init__(self, val, unit_from, unit_to):
        self.msg = "Cannot convert {} from {} to {}".format(val, unit_from, unit_to)
        super().__init__(self.msg)
################################################################################
# FUNCTIONS
################################################################################
def convert(val, unit_from, unit_to):
    """
    Converts value from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Convert from this unit
    :param str unit_to: Convert to this unit
    :returns: Converted value
    :rtype: numeric
    :raises ConversionError: if either unit is unknown or they measure different things
    """
    if unit_from not in UNITS or unit_to not in UNITS:
        raise ConversionError(val, unit_from, unit_to)
    type_from, scale_from, offset_from = UNITS[unit_from]
    type_to, scale_to, offset_to = UNITS[unit_to]
    if type_from != type_to:
        raise ConversionError(val, unit_from, unit_to)
    if unit_from == unit_to:
        return val

    base = (val - offset_from) / scale_from
    return (base * scale_to) + offset_to
