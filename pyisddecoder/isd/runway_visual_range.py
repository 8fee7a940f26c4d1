################################################################################
# pyisddecoder/isd/runway_visual_range.py
#
# Additional data section: runway visual range group (ED)
#
# TDBA 2026-09-30:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
################################################################################
# CLASSES
################################################################################
class ED1(Group):
    """
    ED1 - runway visual range

    * direction angle of the runway, in tens of degrees (e.g. 27 for 270)
    * runway designator code (L, C, R or U)
    * visibility dimension
    * quality code
    """
    _COMPONENTS = [
        ("direction_angle", Nullable(2, type=int)),
        ("runway_designator_code", Nullable(1)),
        ("visibility_dimension", Quantity(4, "m")),
        ("quality_code", Code(1))
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = [("ED1", ED1)]
