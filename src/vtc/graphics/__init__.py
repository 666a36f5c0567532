"""
Graphics Module
===============

Image transmission encoding for the terminal graphics protocol.

This module provides:
    - Format conversion: PNG detection/decoding, RGBA -> RGB
    - ChunkEncoder: base64 text slicing
    - TransmissionPipeline: full transmit-and-display frame sets
    - build_query: the support query frame

Example:
    from vtc.graphics import TransmissionPipeline, build_query
    from vtc.models import TransmitOptions
    from vtc.output import OutputSink
    
    sink = OutputSink()
    TransmissionPipeline().transmit(png_bytes, TransmitOptions(), sink)
    sink.write(build_query())
"""

from vtc.graphics.chunking import chunk, iter_chunks
from vtc.graphics.container import (
    PNG_SIGNATURE,
    ContainerDecoder,
    OpenCVContainerDecoder,
    ResolvedPayload,
    decode_container,
    is_recognized_container,
    resolve_payload,
    to_rgb24,
)
from vtc.graphics.query import build_query
from vtc.graphics.transmission import (
    FIRST_CHUNK_KEYS,
    TransmissionPipeline,
    first_chunk_metadata,
)


__all__ = [
    "chunk",
    "iter_chunks",
    "PNG_SIGNATURE",
    "ContainerDecoder",
    "OpenCVContainerDecoder",
    "ResolvedPayload",
    "decode_container",
    "is_recognized_container",
    "resolve_payload",
    "to_rgb24",
    "build_query",
    "FIRST_CHUNK_KEYS",
    "TransmissionPipeline",
    "first_chunk_metadata",
]
