################################################################################
# pyisddecoder/isd/cloud_solar.py
#
# Additional data section: cloud, sunshine and solar radiation groups (GA-GR)
#
# TDBA 2026-10-01:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import Group, Code, Nullable, Quantity
from .climate_reference_network import measured
QUALITY_CODE = Code(1)
# Solar radiation data flags are two characters wide
FLAG = Nullable(2)
################################################################################
# CLASSES
################################################################################
class GAX(Group):
    """
    GA1-GA6 - sky cover layer
    """
    _COMPONENTS = [
        ("coverage_code", Nullable(2)),
        ("coverage_quality_code", QUALITY_CODE),
        ("base_height_dimension", Quantity(6, "m")),
        ("base_height_quality_code", QUALITY_CODE),
        ("cloud_type_code", Nullable(2)),
        ("cloud_type_quality_code", QUALITY_CODE)
    ]
class GDX(Group):
    """
    GD1-GD6 - sky cover summation state
    """
    _COMPONENTS = [
        ("coverage_code", Nullable(1)),
        ("coverage_code_2", Nullable(2)),
        ("coverage_quality_code", QUALITY_CODE),
        ("height_dimension", Quantity(6, "m")),
        ("height_quality_code", QUALITY_CODE),
        ("characteristic_code", Nullable(1))
    ]
class GE1(Group):
    """
    GE1 - sky condition observation identifier
    """
    _COMPONENTS = [
        ("convective_cloud_code", Nullable(1)),
        ("vertical_datum", Nullable(6)),
        ("base_height_upper_range", Quantity(6, "m")),
        ("base_height_lower_range", Quantity(6, "m"))
    ]
class GF1(Group):
    """
    GF1 - sky condition observation
    """
    _COMPONENTS = [
        ("total_coverage_code", Nullable(2)),
        ("total_opaque_coverage_code", Nullable(2)),
        ("total_coverage_quality_code", QUALITY_CODE),
        ("lowest_cloud_cover_code", Nullable(2)),
        ("lowest_cloud_cover_quality_code", QUALITY_CODE),
        ("low_cloud_genus_code", Nullable(2)),
        ("low_cloud_genus_quality_code", QUALITY_CODE),
        ("lowest_cloud_base_height", Quantity(5, "m")),
        ("lowest_cloud_base_height_quality_code", QUALITY_CODE),
        ("mid_cloud_genus_code", Nullable(2)),
        ("mid_cloud_genus_quality_code", QUALITY_CODE),
        ("high_cloud_genus_code", Nullable(2)),
        ("high_cloud_genus_quality_code", QUALITY_CODE)
    ]
class GGX(Group):
    """
    GG1-GG6 - below station cloud layer
    """
    _COMPONENTS = [
        ("coverage_code", Nullable(2)),
        ("coverage_quality_code", QUALITY_CODE),
        ("top_height_dimension", Quantity(5, "m")),
        ("top_height_quality_code", QUALITY_CODE),
        ("type_code", Nullable(2)),
        ("type_quality_code", QUALITY_CODE),
        ("top_code", Nullable(2)),
        ("top_quality_code", QUALITY_CODE)
    ]
class GH1(Group):
    """
    GH1 - hourly solar radiation
    """
    _COMPONENTS = \
        measured("average_solar_radiation", Quantity(5, "W/m2", 10)) + \
        measured("minimum_solar_radiation", Quantity(5, "W/m2", 10)) + \
        measured("maximum_solar_radiation", Quantity(5, "W/m2", 10)) + \
        measured("std_solar_radiation", Quantity(5, "W/m2", 10))
class GJ1(Group):
    """
    GJ1 - sunshine duration for the day
    """
    _COMPONENTS = [
        ("duration", Quantity(4, "min")),
        ("quality_code", QUALITY_CODE)
    ]
class GK1(Group):
    """
    GK1 - sunshine as a percentage of the possible amount
    """
    _COMPONENTS = [
        ("percent", Quantity(3, "%")),
        ("quality_code", QUALITY_CODE)
    ]
class GL1(Group):
    """
    GL1 - sunshine duration for the month
    """
    _COMPONENTS = [
        ("duration", Quantity(5, "min")),
        ("quality_code", QUALITY_CODE)
    ]
class GM1(Group):
    """
    GM1 - solar irradiance
    """
    _COMPONENTS = [
        ("time_period", Quantity(4, "min")),
        ("global_irradiance", Quantity(4, "W/m2")),
        ("global_irradiance_data_flag", FLAG),
        ("global_irradiance_quality_code", QUALITY_CODE),
        ("direct_beam_irradiance", Quantity(4, "W/m2")),
        ("direct_beam_irradiance_data_flag", FLAG),
        ("direct_beam_irradiance_quality_code", QUALITY_CODE),
        ("diffuse_irradiance", Quantity(4, "W/m2")),
        ("diffuse_irradiance_data_flag", FLAG),
        ("diffuse_irradiance_quality_code", QUALITY_CODE),
        ("uvb_global_irradiance", Quantity(4, "mW/m2")),
        ("uvb_global_irradiance_quality_code", QUALITY_CODE)
    ]
class GN1(Group):
    """
    GN1 - solar radiation
    """
    _COMPONENTS = [
        ("time_period", Quantity(4, "min")),
        ("upwelling_global_solar_radiation", Quantity(4, "W/m2")),
        ("upwelling_global_solar_radiation_quality_code", QUALITY_CODE),
        ("downwelling_thermal_infrared_radiation", Quantity(4, "W/m2")),
        ("downwelling_thermal_infrared_radiation_quality_code", QUALITY_CODE),
        ("upwelling_thermal_infrared_radiation", Quantity(4, "W/m2")),
        ("upwelling_thermal_infrared_radiation_quality_code", QUALITY_CODE),
        ("photosynthetically_active_radiation", Quantity(4, "W/m2")),
        ("photosynthetically_active_radiation_quality_code", QUALITY_CODE),
        ("solar_zenith_angle", Quantity(3, "deg")),
        ("solar_zenith_angle_quality_code", QUALITY_CODE)
    ]
class GO1(Group):
    """
    GO1 - net solar radiation
    """
    _COMPONENTS = [
        ("time_period", Quantity(4, "min")),
        ("net_solar_radiation", Quantity(4, "W/m2")),
        ("net_solar_radiation_quality_code", QUALITY_CODE),
        ("net_infrared_radiation", Quantity(4, "W/m2")),
        ("net_infrared_radiation_quality_code", QUALITY_CODE),
        ("net_radiation", Quantity(4, "W/m2")),
        ("net_radiation_quality_code", QUALITY_CODE)
    ]
class GP1(Group):
    """
    GP1 - modeled solar irradiance
    """
    _COMPONENTS = [
        ("time_period", Quantity(4, "min")),
        ("global_horizontal", Quantity(4, "W/m2")),
        ("global_horizontal_source_flag", FLAG),
        ("global_horizontal_uncertainty", Quantity(3, "%")),
        ("direct_normal", Quantity(4, "W/m2")),
        ("direct_normal_source_flag", FLAG),
        ("direct_normal_uncertainty", Quantity(3, "%")),
        ("diffuse_horizontal", Quantity(4, "W/m2")),
        ("diffuse_horizontal_source_flag", FLAG),
        ("diffuse_horizontal_uncertainty", Quantity(3, "%"))
    ]
class GQ1(Group):
    """
    GQ1 - hourly solar angle
    """
    _COMPONENTS = [
        ("time_period", Quantity(4, "min")),
        ("mean_zenith_angle", Quantity(4, "deg", 10)),
        ("mean_zenith_angle_quality_code", QUALITY_CODE),
        ("mean_azimuth_angle", Quantity(4, "deg", 10)),
        ("mean_azimuth_angle_quality_code", QUALITY_CODE)
    ]
class GR1(Group):
    """
    GR1 - hourly extraterrestrial radiation
    """
    _COMPONENTS = [
        ("time_period", Quantity(4, "min")),
        ("horizontal_radiation", Quantity(4, "W/m2")),
        ("horizontal_radiation_quality_code", QUALITY_CODE),
        ("normal_radiation", Quantity(4, "W/m2")),
        ("normal_radiation_quality_code", QUALITY_CODE)
    ]
################################################################################
# SLOTS
################################################################################
SLOTS = (
    [("GA{}".format(i), GAX) for i in range(1, 7)] +
    [("GD{}".format(i), GDX) for i in range(1, 7)] +
    [("GE1", GE1), ("GF1", GF1)] +
    [("GG{}".format(i), GGX) for i in range(1, 7)] +
    [
        ("GH1", GH1), ("GJ1", GJ1), ("GK1", GK1), ("GL1", GL1), ("GM1", GM1),
        ("GN1", GN1), ("GO1", GO1), ("GP1", GP1), ("GQ1", GQ1), ("GR1", GR1)
    ]
)
