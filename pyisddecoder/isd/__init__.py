################################################################################
# pyisddecoder/isd/__init__.py
#
# ISD (Integrated Surface Database) decoder module for pyisddecoder
#
# TDBA 2026-09-28:
#   * First version
# TDBA 2026-10-12:
#   * Optional groups can be dropped instead of failing the record (strict=False)
# TDBA 2026-10-19:
#   * Dates and elevations must match their fixed formats exactly
################################################################################
# CONFIGURATION
################################################################################
import logging, re
from collections import OrderedDict
from datetime import datetime
import pyisddecoder
from pyisddecoder import Component, Code, Nullable, DecodeError, InvalidValue
from . import mandatory
from . import (
    precipitation, weather_occurrence, climate_reference_network,
    network_metadata, runway_visual_range, cloud_solar, ground_surface,
    temperature, pressure, wind, sea_surface_temperature, marine
)
DATE_FORMAT = "%Y%m%d%H%M"
DATE_RE = re.compile(r"[0-9]{12}")
ELEVATION_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

# Input keys which carry no observation data and are skipped
IGNORED = ("REM", "EQD", "ADD", "QNN")
################################################################################
# FUNCTIONS
################################################################################
def parse_date(raw):
    """
    Parses an observation time in the form YYYYMMDDHHmm

    :param string raw: Raw date and time
    :returns: Observation time
    :rtype: datetime.datetime
    :raises ValueError: if raw is not exactly 12 digits or is not a valid time
    """
    if not DATE_RE.fullmatch(raw):
        raise ValueError("{} does not match YYYYMMDDHHmm".format(repr(raw)))
    return datetime.strptime(raw, DATE_FORMAT)
def format_date(date):
    """
    Formats an observation time in the form YYYYMMDDHHmm
    """
    return date.strftime(DATE_FORMAT)
def input_key(name):
    """
    Returns the key a field is read from (ISD codes are upper case)
    """
    return name.upper()
def output_key(name):
    """
    Returns the key a field is written to (output is lower case)
    """
    return name.lower()
################################################################################
# COMPONENT CLASSES
################################################################################
class Timestamp(Component):
    def decode(self, raw):
        try:
            return parse_date(raw)
        except ValueError:
            raise InvalidValue(raw, "date ({})".format(DATE_FORMAT))
    def encode(self, value):
        return format_date(value)
class Elevation(Component):
    """
    Elevation of the station, in metres. Always reported
    """
    def decode(self, raw):
        if not ELEVATION_RE.fullmatch(raw):
            raise InvalidValue(raw, "elevation")
        return float(raw)
    def encode(self, value):
        return value
################################################################################
# FIELD TABLES
################################################################################
METADATA = [
    ("station", Nullable(11)),
    ("date", Timestamp(12)),
    ("source", Nullable(1)),
    ("latitude", Nullable(6, sentinel=("+99999", "99999"), type=float)),
    ("longitude", Nullable(7, sentinel=("+999999", "999999"), type=float)),
    ("elevation", Elevation(5)),
    ("name", Code()),
    ("report_type", Nullable(5)),
    ("call_sign", Nullable(5)),
    ("quality_control", Code(4))
]
MANDATORY = [
    ("wnd", mandatory.Wind),
    ("cig", mandatory.Ceiling),
    ("vis", mandatory.Visibility),
    ("tmp", mandatory.Temperature),
    ("slp", mandatory.SeaLevelPressure)
]
ADDITIONAL = OrderedDict(
    precipitation.SLOTS +
    weather_occurrence.SLOTS +
    climate_reference_network.SLOTS +
    network_metadata.SLOTS +
    runway_visual_range.SLOTS +
    cloud_solar.SLOTS +
    ground_surface.SLOTS +
    temperature.SLOTS +
    pressure.SLOTS +
    wind.SLOTS +
    sea_surface_temperature.SLOTS +
    marine.SLOTS
)
################################################################################
# RECORD CLASSES
################################################################################
class Record(object):
    """
    A single decoded ISD observation. Station metadata and the mandatory groups
    are always set. Each additional data slot (e.g. aa1) is set to its group,
    or None if it was not in the input
    """
    def __init__(self, **kwargs):
        for name, _ in METADATA + MANDATORY:
            setattr(self, name, kwargs[name])
        for code in ADDITIONAL:
            setattr(self, output_key(code), kwargs.get(output_key(code)))
    def additional(self):
        """
        Returns the additional data slots present in the record

        :returns: slot code (lower case) and group, in slot table order
        :rtype: list
        """
        slots = []
        for code in ADDITIONAL:
            group = getattr(self, output_key(code))
            if group is not None:
                slots.append((output_key(code), group))
        return slots
    def __eq__(self, other):
        return isinstance(other, Record) and vars(self) == vars(other)
    def __repr__(self):
        return "Record(station={}, date={})".format(self.station, self.date)
################################################################################
# REPORT CLASSES
################################################################################
class ISD(pyisddecoder.Report):
    """
    Decodes ISD records from their tagged fields and encodes them into sparse
    dicts

    :param boolean strict: If True, a malformed additional data group fails the
        whole record. Otherwise the group is dropped with a warning
    """
    def __init__(self, strict=True):
        self.strict = strict
    def _decode(self, fields):
        data = {}

        # Station metadata and mandatory groups must all be present
        for name, decoder in METADATA + MANDATORY:
            key = input_key(name)
            if key not in fields or fields[key] is None:
                raise DecodeError("{} is missing".format(key), field=key)
            data[name] = self._decode_field(key, fields[key], decoder)

        # Additional data groups are decoded when present
        for code, group in ADDITIONAL.items():
            raw = fields.get(code)
            if raw is None or raw == "":
                continue
            try:
                data[output_key(code)] = self._decode_field(code, raw, group)
            except DecodeError as e:
                if self.strict:
                    raise
                logging.warning("Dropping {}: {}".format(code, e))

        # Warn about anything we don't recognise
        known = set(input_key(name) for name, _ in METADATA + MANDATORY)
        for key in fields:
            if key not in known and key not in ADDITIONAL and key not in IGNORED:
                logging.warning("{} is not a recognised ISD field".format(key))

        return Record(**data)
    def _decode_field(self, key, raw, decoder):
        try:
            return decoder.decode(raw)
        except Exception as e:
            raise DecodeError(
                "Unable to decode {} {}: {}".format(key, repr(raw), e),
                field=key, raw=raw
            )
    def _encode(self, record):
        data = {}
        for name, component in METADATA:
            data[output_key(name)] = component.encode(getattr(record, name))
        for name, _ in MANDATORY:
            data[output_key(name)] = getattr(record, name).encode()

        # Only include the additional data which is present
        for code, group in record.additional():
            data[code] = group.encode()
        return data
