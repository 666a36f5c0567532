"""
Wire Enumerations
=================

Enumerations shared by the graphics encoders.

Format Codes:
    The graphics protocol tags every transmission with a numeric format
    code telling the terminal how to interpret the payload bytes:

        png   -> 100  (PNG container, passed through verbatim)
        rgb   -> 24   (raw 8-bit RGB, 3 bytes per pixel)
        rgba  -> 32   (raw 8-bit RGBA, 4 bytes per pixel)
"""

from enum import Enum


class WireFormat(str, Enum):
    """
    Pixel wire format requested for a transmission.
    
    Attributes:
        PNG: Container passthrough, the file bytes are sent unchanged
        RGB: Raw 24-bit pixels (alpha stripped when decoding a PNG)
        RGBA: Raw 32-bit pixels
    """
    
    PNG = "png"
    RGB = "rgb"
    RGBA = "rgba"
    
    @property
    def code(self) -> int:
        """Numeric protocol code for the `f` key."""
        return _FORMAT_CODES[self]
    
    @property
    def channels(self) -> int:
        """Bytes per pixel for raw formats (0 for the container)."""
        return _FORMAT_CHANNELS[self]


_FORMAT_CODES = {
    WireFormat.PNG: 100,
    WireFormat.RGB: 24,
    WireFormat.RGBA: 32,
}

_FORMAT_CHANNELS = {
    WireFormat.PNG: 0,
    WireFormat.RGB: 3,
    WireFormat.RGBA: 4,
}


class GraphicsAction(str, Enum):
    """
    Graphics command issued by the CLI.
    
    Attributes:
        TRANSMIT_DISPLAY: Send image data and display it (`a=T`)
        QUERY: Ask the terminal whether the protocol is supported (`a=q`)
    """
    
    TRANSMIT_DISPLAY = "transmit-display"
    QUERY = "query"
