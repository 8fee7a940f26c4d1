################################################################################
# pyisddecoder/__init__.py
#
# Main __init__ script for pyisddecoder
#
# TDBA 2026-09-28:
#   * First version, based on the pymetdecoder base classes
# TDBA 2026-10-12:
#   * Added lenient handling of optional groups
################################################################################
# IMPORTS
################################################################################
import json
from . import conversion
################################################################################
# EXCEPTION CLASSES
################################################################################
class DecodeError(Exception):
    def __init__(self, msg, field=None, raw=None):
        self.msg   = msg
        self.field = field
        self.raw   = raw
        super().__init__(self.msg)
    def __str__(self):
        return self.msg
class EncodeError(Exception):
    def __init__(self, msg):
        self.msg = "encoding error: {}".format(msg)
        super().__init__(self.msg)
class InvalidValue(Exception):
    def __init__(self, val, desc):
        self.msg = "{} is not a valid {}".format(repr(val), desc)
        super().__init__(self.msg)
class InvalidGroup(Exception):
    def __init__(self, group, raw, expected):
        self.msg = "{} is not a valid {} group (expected {} components)".format(
            repr(raw), group, expected
        )
        super().__init__(self.msg)
################################################################################
# VALUE CLASSES
################################################################################
class Value(object):
    """
    A scalar which may not have been reported. Missing values are identified by
    comparing the raw string with the sentinel(s) defined for the field

    :param anything value: Decoded value, or None if not reported
    """
    def __init__(self, value=None):
        self.value = value
    @classmethod
    def decode(cls, raw, sentinel, type=str):
        """
        Decodes a raw string

        :param string raw: Raw string
        :param string/tuple sentinel: String(s) meaning "not reported"
        :param callable type: Type to parse a reported value as
        :returns: Value (with value None if not reported)
        :raises InvalidValue: if the value is reported but cannot be parsed
        """
        sentinels = (sentinel,) if isinstance(sentinel, str) else tuple(sentinel)
        if raw in sentinels:
            return cls(None)
        try:
            return cls(type(raw))
        except ValueError:
            raise InvalidValue(raw, type.__name__)
    def is_available(self):
        return self.value is not None
    def encode(self):
        return self.value
    def __eq__(self, other):
        return isinstance(other, Value) and self.value == other.value
    def __repr__(self):
        return "Value({})".format(repr(self.value))
class RecordValue(object):
    """
    A scaled numeric value with a unit. Missing values are identified when the
    raw string contains no digit other than the filler digit 9

    :param numeric value: Value in physical units
    :param string unit: Unit of the value
    """
    FILLER = "9"
    def __init__(self, value, unit):
        self.value = value
        self.unit  = unit
    @classmethod
    def is_available(cls, raw):
        """
        Checks if the raw value was reported

        :param string raw: Raw string
        :returns: True if any digit other than the filler digit is present
        :rtype: boolean
        """
        for c in raw:
            if c.isdigit() and c != cls.FILLER:
                return True
        return False
    @classmethod
    def decode(cls, raw, unit, divisor=1, type=float):
        """
        Decodes a raw scaled value

        :param string raw: Raw string
        :param string unit: Unit of the decoded value
        :param numeric divisor: Divisor converting the raw magnitude into the unit
        :param callable type: Type to parse the raw magnitude as
        :returns: RecordValue, or None if not reported
        :raises InvalidValue: if the value is reported but cannot be parsed
        """
        if not cls.is_available(raw):
            return None
        try:
            magnitude = type(raw)
        except ValueError:
            raise InvalidValue(raw, type.__name__)
        if divisor != 1:
            magnitude = magnitude / divisor
        return cls(magnitude, unit)
    def to(self, unit):
        """
        Returns this value converted to another unit

        :param string unit: Unit to convert to
        :returns: New RecordValue
        :raises conversion.ConversionError: if the units are not compatible
        """
        return RecordValue(conversion.convert(self.value, self.unit, unit), unit)
    def encode(self):
        return { "value": self.value, "unit": self.unit }
    def __eq__(self, other):
        return isinstance(other, RecordValue) and (self.value, self.unit) == (other.value, other.unit)
    def __repr__(self):
        return "RecordValue({}, {})".format(repr(self.value), repr(self.unit))
################################################################################
# COMPONENT CLASSES
################################################################################
class Component(object):
    """
    Base class for one component of a group. Instances hold the constants
    (width, sentinel, unit, divisor) for a field and are shared by all groups
    of that category
    """
    def __init__(self, width=None):
        self.width = width
    def decode(self, raw):
        raise NotImplementedError("decode needs to be implemented in {} subclass".format(type(self).__name__))
    def encode(self, value):
        return None if value is None else value.encode()
class Code(Component):
    """
    Quality control or other code, kept as reported
    """
    def decode(self, raw):
        return raw
    def encode(self, value):
        return value
class Nullable(Component):
    """
    Component decoded into a Value

    :param int width: Width of the field
    :param string/tuple sentinel: Missing indicator(s). Defaults to 9 * width
    :param callable type: Type of the value
    """
    def __init__(self, width, sentinel=None, type=str):
        super().__init__(width)
        self.sentinel = "9" * width if sentinel is None else sentinel
        self.type = type
    def decode(self, raw):
        return Value.decode(raw, self.sentinel, type=self.type)
class Quantity(Component):
    """
    Component decoded into a RecordValue

    :param int width: Width of the field
    :param string unit: Unit of the decoded value
    :param int divisor: Scaling factor of the raw value
    """
    def __init__(self, width, unit, divisor=1):
        super().__init__(width)
        self.unit    = unit
        self.divisor = divisor
        self.type    = int if divisor == 1 else float
    def decode(self, raw):
        return RecordValue.decode(raw, self.unit, self.divisor, type=self.type)
################################################################################
# GROUP CLASSES
################################################################################
class Group(object):
    """
    Base class for a group of components. Subclasses set _COMPONENTS to a list
    of (name, component) tuples in the order they are reported
    """
    _COMPONENTS = []
    def __init__(self, **kwargs):
        for name, _ in self._COMPONENTS:
            setattr(self, name, kwargs.get(name))
    @classmethod
    def decode(cls, raw):
        """
        Decodes the comma separated group into an instance of the class

        :param string raw: Raw group
        :raises InvalidGroup: if the number of components is wrong
        """
        parts = raw.split(",")
        if len(parts) != len(cls._COMPONENTS):
            raise InvalidGroup(cls.__name__, raw, len(cls._COMPONENTS))
        return cls(**{
            name: component.decode(part)
            for (name, component), part in zip(cls._COMPONENTS, parts)
        })
    def encode(self):
        return {
            name: component.encode(getattr(self, name))
            for name, component in self._COMPONENTS
        }
    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)
    def __repr__(self):
        return "{}({})".format(type(self).__name__, vars(self))
################################################################################
# BASE CLASSES
################################################################################
class Report(object):
    """
    Base class for a meteorological report
    """
    def decode(self, message):
        """
        Decode function
        """
        try:
            return self._decode(message)
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(str(e))
    def encode(self, data):
        """
        Encode function
        """
        try:
            return self._encode(data)
        except Exception as e:
            raise EncodeError(str(e))
    def _decode(self, message):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
    def _encode(self, data):
        """
        Actual encode function. Implement in subclass
        """
        raise NotImplementedError("_encode needs to be implemented in {} subclass".format(type(self).__name__))
    def to_json(self, data):
        """
        Encodes the data and returns it as a JSON string
        """
        return json.dumps(self.encode(data))
