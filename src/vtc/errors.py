"""
Error Taxonomy
==============

Exceptions raised while loading configuration or preparing an image
transmission.

All of these are local, terminal failures for the current invocation.
Nothing is retried and nothing is written to the output when one is raised.
"""


class VtcError(Exception):
    """Base class for all vtc errors."""
    pass


class TransmissionError(VtcError):
    """Raised when an image cannot be prepared for transmission."""
    pass


class InputFormatError(TransmissionError):
    """Raised when a PNG container is required but the input is not one."""
    pass


class DecodeError(TransmissionError):
    """Raised when the input carries a PNG signature but the body is malformed."""
    pass


class MissingDimensionsError(TransmissionError):
    """Raised when raw pixel input is given without both width and height."""
    pass


class PixelSizeError(TransmissionError):
    """Raised when raw pixel input length does not match width*height*channels."""
    pass


class ConfigError(VtcError):
    """Raised when a named config file is missing or is not valid YAML."""
    pass
