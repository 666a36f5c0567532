"""
vtc
===

Escape-sequence encoders for terminal graphics and notifications.

This package turns raster images and short text notifications into the
wire frames understood by terminal emulators:

Components:
    - vt: APC / OSC escape framing primitives
    - graphics: Image transmission pipeline (format resolution, chunking,
      per-chunk metadata) and the status query frame
    - notification: OSC 99 desktop notification frames
    - output: Serialized output boundary (one write per frame set)

Example:
    from vtc.graphics import TransmissionPipeline
    from vtc.models import TransmitOptions, WireFormat

    pipeline = TransmissionPipeline()
    frames = pipeline.encode(png_bytes, TransmitOptions(format=WireFormat.PNG))
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
