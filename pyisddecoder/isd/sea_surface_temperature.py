################################################################################
# pyisddecoder/isd/sea_surface_temperature.py
#
# Additional data section: sea surface temperature group (SA)
#
# TDBA 2026-10-03:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Quantity
################################################################################
# CLASSES
################################################################################
class SA1(Group):
    _COMPONENTS = [
        ("temperature", Quantity(4, "Cel", 10)),
        ("quality_code", Code(1))
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [("SA1", SA1)]
