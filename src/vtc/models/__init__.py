"""
Data Models
===========

Typed data for the vtc encoders.

Models:
    Wire:
        - WireFormat: png / rgb / rgba with protocol codes
        - GraphicsAction: transmit-display / query
    
    Pixels:
        - PixelBuffer: Raw pixel bytes with geometry
        - Chunk: One base64 slice of a transmission
    
    Options:
        - TransmitOptions, QueryOptions, NotificationOptions
"""

from vtc.models.wire import GraphicsAction, WireFormat
from vtc.models.pixels import Chunk, PixelBuffer
from vtc.models.options import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_QUERY_IMAGE_ID,
    NotificationOptions,
    QueryOptions,
    TransmitOptions,
)

__all__ = [
    # Wire
    "WireFormat",
    "GraphicsAction",
    # Pixels
    "PixelBuffer",
    "Chunk",
    # Options
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_QUERY_IMAGE_ID",
    "TransmitOptions",
    "QueryOptions",
    "NotificationOptions",
]
