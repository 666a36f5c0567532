"""
Pixel Data Models
=================

Typed containers passed between the graphics pipeline stages.

Design Rules:
    - Immutable (frozen) to prevent accidental modification
    - PixelBuffer enforces length == width * height * channels
    - Reprs never dump raw bytes or payload text
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """
    Raw pixel bytes with known geometry.
    
    Attributes:
        data: Row-major pixel bytes, `channels` bytes per pixel
        width: Image width in pixels
        height: Image height in pixels
        channels: 3 (RGB) or 4 (RGBA)
    """
    
    data: bytes
    width: int
    height: int
    channels: int
    
    def __post_init__(self) -> None:
        if self.channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {self.channels}")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"dimensions must be non-negative, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(
                f"pixel data is {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height}x{self.channels}"
            )
    
    @property
    def pixel_count(self) -> int:
        return self.width * self.height
    
    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self.width}, height={self.height}, "
            f"channels={self.channels}, bytes={len(self.data)})"
        )


@dataclass(frozen=True, slots=True)
class Chunk:
    """
    One slice of base64 text sent as a single frame.
    
    Attributes:
        index: Position of the chunk in the transmission (0-based)
        payload: Base64 characters carried by this chunk
        is_first: True for the chunk that carries display metadata
        is_last: True for the chunk that terminates the transmission
    """
    
    index: int
    payload: str
    is_first: bool
    is_last: bool
    
    def __repr__(self) -> str:
        return (
            f"Chunk(index={self.index}, chars={len(self.payload)}, "
            f"is_first={self.is_first}, is_last={self.is_last})"
        )
