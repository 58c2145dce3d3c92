# gexf/exceptions.py

class GexfError(Exception):
    """Base class for every error raised by the codec."""
    pass

class MalformedMarkupError(GexfError):
    """Raised when the input is not well-formed XML."""
    pass

class SchemaMismatchError(GexfError):
    """Raised when a required element or attribute is missing or has the wrong shape."""
    pass

class InvalidDateError(GexfError, ValueError):
    """Raised when a date is not a real calendar day in YYYY-MM-DD form."""
    pass

class UnknownEnumValueError(GexfError, ValueError):
    """Raised when an enumeration token is not one of its fixed values."""
    pass

class ChannelOutOfRangeError(GexfError, ValueError):
    """Raised when a color channel is not a decimal numeral in [0, 255]."""
    pass
