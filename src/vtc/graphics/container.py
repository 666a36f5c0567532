"""
Format Converter
================

PNG container detection, decoding and pixel wire format resolution.

This module decides which bytes actually go on the wire for a requested
format:

    requested   | input is PNG                 | input is not PNG
    ------------+------------------------------+-------------------------------
    png         | bytes verbatim               | InputFormatError
    rgb / rgba  | decode, decoded size wins    | raw pixels, width and height
                |                              | mandatory (MissingDimensionsError)

Design Rules:
    - This is the ONLY place in the codebase that decodes images
    - The decoder is injected (ContainerDecoder protocol) so tests can
      substitute a double
    - Alpha is dropped for RGB, never blended
    - Fails fast on corrupt containers
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import cv2
import numpy as np

from vtc.errors import (
    DecodeError,
    InputFormatError,
    MissingDimensionsError,
    PixelSizeError,
)
from vtc.models.pixels import PixelBuffer
from vtc.models.wire import WireFormat


logger = logging.getLogger(__name__)


PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])


def is_recognized_container(data: bytes) -> bool:
    """Return True iff `data` starts with the 8-byte PNG signature."""
    return len(data) >= len(PNG_SIGNATURE) and data[:len(PNG_SIGNATURE)] == PNG_SIGNATURE


class ContainerDecoder(Protocol):
    """
    Protocol for PNG decoding backends.

    Implementations turn container bytes into a 4-channel RGBA
    PixelBuffer and raise DecodeError when the body is malformed.
    """

    def decode(self, data: bytes) -> PixelBuffer:
        """
        Decode container bytes.

        Args:
            data: Bytes that already passed the signature check

        Returns:
            PixelBuffer with channels=4, row-major RGBA

        Raises:
            DecodeError: If the container body cannot be decoded
        """
        ...


class OpenCVContainerDecoder:
    """
    PNG decoder backed by OpenCV.

    Uses cv2.imdecode with IMREAD_UNCHANGED so the alpha channel and bit
    depth survive, then normalizes every PNG color type to RGBA8:
        - gray          -> R=G=B=gray, A=255
        - gray + alpha  -> R=G=B=gray, A=alpha
        - BGR           -> RGB, A=255
        - BGRA          -> RGBA
    16-bit samples are reduced to their high byte.
    """

    def decode(self, data: bytes) -> PixelBuffer:
        buf = np.frombuffer(data, np.uint8)
        try:
            image = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
        except cv2.error as e:
            raise DecodeError(f"Input file is not a valid PNG: {e}") from e

        if image is None:
            raise DecodeError("Input file is not a valid PNG: cv2.imdecode returned None")

        if image.dtype == np.uint16:
            image = (image >> 8).astype(np.uint8)
        elif image.dtype != np.uint8:
            raise DecodeError(f"Unsupported PNG sample type: {image.dtype}")

        rgba = _to_rgba(image)
        height, width = rgba.shape[:2]

        logger.debug(f"Decoded PNG: {width}x{height}, source shape {image.shape}")

        return PixelBuffer(
            data=np.ascontiguousarray(rgba).tobytes(),
            width=width,
            height=height,
            channels=4,
        )


def _to_rgba(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)

    channels = image.shape[2]
    if channels == 1:
        return cv2.cvtColor(np.ascontiguousarray(image[:, :, 0]), cv2.COLOR_GRAY2RGBA)
    if channels == 2:
        gray, alpha = image[:, :, 0], image[:, :, 1]
        return np.dstack((gray, gray, gray, alpha))
    if channels == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)

    raise DecodeError(f"Invalid image shape: {image.shape}")


def decode_container(
    data: bytes,
    decoder: Optional[ContainerDecoder] = None,
) -> PixelBuffer:
    """
    Decode a PNG container into RGBA pixels.

    Args:
        data: PNG bytes
        decoder: Decoding backend (OpenCV when None)

    Returns:
        PixelBuffer with channels=4

    Raises:
        DecodeError: If decoding fails or the decoder misbehaves
    """
    decoder = decoder or OpenCVContainerDecoder()
    pixels = decoder.decode(data)
    if pixels.channels != 4:
        raise DecodeError(
            f"Decoder returned {pixels.channels} channels, expected 4"
        )
    return pixels


def to_rgb24(buffer: PixelBuffer) -> PixelBuffer:
    """
    Strip the alpha channel from an RGBA buffer.

    For every pixel the first 3 of its 4 bytes are kept in the same
    row-major order; output length is pixel_count * 3.

    Raises:
        ValueError: If the buffer is not 4-channel
    """
    if buffer.channels != 4:
        raise ValueError(f"to_rgb24 expects a 4-channel buffer, got {buffer.channels}")

    pixels = np.frombuffer(buffer.data, np.uint8).reshape(-1, 4)
    return PixelBuffer(
        data=pixels[:, :3].tobytes(),
        width=buffer.width,
        height=buffer.height,
        channels=3,
    )


@dataclass(frozen=True, slots=True)
class ResolvedPayload:
    """
    Bytes chosen for the wire plus the dimensions to advertise.

    Attributes:
        data: Bytes that will be base64-encoded
        width: Pixel width to emit as `s`, if known
        height: Pixel height to emit as `v`, if known
    """

    data: bytes
    width: Optional[int]
    height: Optional[int]

    def __repr__(self) -> str:
        return (
            f"ResolvedPayload(bytes={len(self.data)}, "
            f"width={self.width}, height={self.height})"
        )


def resolve_payload(
    data: bytes,
    fmt: WireFormat,
    width: Optional[int] = None,
    height: Optional[int] = None,
    decoder: Optional[ContainerDecoder] = None,
) -> ResolvedPayload:
    """
    Select or convert the bytes to send for a requested wire format.

    Args:
        data: Raw input bytes (file contents)
        fmt: Requested wire format
        width: Caller-supplied pixel width
        height: Caller-supplied pixel height
        decoder: PNG decoding backend (OpenCV when None)

    Returns:
        ResolvedPayload with the bytes to send and the resolved size

    Raises:
        InputFormatError: png requested but input is not a PNG
        DecodeError: PNG signature present but body malformed
        MissingDimensionsError: raw pixels without width and height
        PixelSizeError: raw pixel length disagrees with the dimensions
    """
    is_png = is_recognized_container(data)

    if fmt == WireFormat.PNG:
        if not is_png:
            raise InputFormatError("Input file is not a valid PNG")
        return ResolvedPayload(data=data, width=width, height=height)

    if is_png:
        pixels = decode_container(data, decoder)
        if fmt == WireFormat.RGB:
            pixels = to_rgb24(pixels)
        return ResolvedPayload(data=pixels.data, width=pixels.width, height=pixels.height)

    if width is None or height is None:
        raise MissingDimensionsError(
            f"--width and --height are required for raw {fmt.value} input"
        )

    expected = width * height * fmt.channels
    if len(data) != expected:
        raise PixelSizeError(
            f"Raw {fmt.value} input is {len(data)} bytes, expected {expected} "
            f"for {width}x{height}"
        )

    return ResolvedPayload(data=data, width=width, height=height)
